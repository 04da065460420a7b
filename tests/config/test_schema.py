from __future__ import annotations

from filepattern.config.defaults import default_config
from filepattern.config.schema import AppConfig, PatternRule
from filepattern.models.enums import Syntax


class TestPatternRule:
    def test_round_trip(self) -> None:
        rule = PatternRule("c", "**/*.c")
        assert PatternRule.from_dict(rule.to_dict()) == rule


class TestAppConfig:
    def test_round_trip(self) -> None:
        cfg = default_config()
        assert AppConfig.from_dict(cfg.to_dict(), AppConfig()) == cfg

    def test_missing_keys_use_defaults(self) -> None:
        defaults = default_config()
        cfg = AppConfig.from_dict({}, defaults)
        assert cfg.syntax is defaults.syntax
        assert cfg.patterns == defaults.patterns
        assert cfg.patterns is not defaults.patterns

    def test_syntax_parsed(self) -> None:
        cfg = AppConfig.from_dict({"syntax": "legacy_relative"}, default_config())
        assert cfg.syntax is Syntax.LEGACY_RELATIVE

    def test_unknown_syntax_is_standard(self) -> None:
        cfg = AppConfig.from_dict({"syntax": "regex"}, AppConfig(syntax=Syntax.LEGACY))
        assert cfg.syntax is Syntax.STANDARD

    def test_patterns_replace_defaults(self) -> None:
        cfg = AppConfig.from_dict({"patterns": [{"name": "md", "pattern": "docs/*.md"}]}, default_config())
        assert cfg.patterns == [PatternRule("md", "docs/*.md")]

    def test_to_dict_shape(self) -> None:
        data = AppConfig(syntax=Syntax.LEGACY, patterns=[PatternRule("a", "//a")]).to_dict()
        assert data == {"syntax": "legacy", "patterns": [{"name": "a", "pattern": "//a"}]}
