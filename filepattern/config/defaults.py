from __future__ import annotations

from filepattern.config.schema import AppConfig, PatternRule
from filepattern.models.enums import Syntax


def default_config() -> AppConfig:
    return AppConfig(
        syntax=Syntax.STANDARD,
        patterns=[
            PatternRule("python", "**/*.py"),
            PatternRule("c-source", "**/*.c"),
            PatternRule("c-header", "**/*.h"),
            PatternRule("config", "**/*.json"),
        ],
    )
