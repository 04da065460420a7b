from __future__ import annotations

from collections.abc import Iterable

from filepattern.config.schema import AppConfig
from filepattern.models.pattern import Capture, CompiledPattern
from filepattern.services.batch import match_many
from filepattern.services.compiler import compile_pattern


def compile_rules(config: AppConfig) -> list[tuple[str, CompiledPattern]]:
    """Compile every configured rule with the configured syntax, keyed by rule name."""
    return [(rule.name, compile_pattern(rule.pattern, config.syntax)) for rule in config.patterns]


def match_rules(config: AppConfig, paths: Iterable[str]) -> list[tuple[str, str, Capture]]:
    """Return (rule name, path, capture) for every rule matching every path."""
    return match_many(compile_rules(config), ((path, path) for path in paths))
