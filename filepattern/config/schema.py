from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from filepattern.models.enums import Syntax


@dataclass(slots=True)
class PatternRule:
    name: str
    pattern: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "pattern": self.pattern}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> PatternRule:
        return cls(name=str(payload["name"]), pattern=str(payload["pattern"]))


@dataclass(slots=True)
class AppConfig:
    syntax: Syntax = Syntax.STANDARD
    patterns: list[PatternRule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "syntax": self.syntax.to_str(),
            "patterns": [rule.to_dict() for rule in self.patterns],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: AppConfig) -> AppConfig:
        syntax_raw = data.get("syntax")
        syntax = Syntax.from_str(syntax_raw) if syntax_raw is not None else defaults.syntax

        patterns_raw = data.get("patterns")
        if patterns_raw is not None:
            patterns = [PatternRule.from_dict(x) for x in patterns_raw]
        else:
            patterns = list(defaults.patterns)

        return cls(syntax=syntax, patterns=patterns)
