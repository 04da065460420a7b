from __future__ import annotations

from enum import Enum
from typing import Any


class TokenKind(str, Enum):
    LITERAL = "literal"
    STAR = "star"  # * as a whole component
    SKIP = "skip"  # ** as a whole component, zero or more components
    SKIP1 = "skip1"  # one or more components, only produced by the optimizer and the legacy lexer
    STARS = "stars"  # a component with one or more *, e.g. foo*bar*.c

    @property
    def is_skip(self) -> bool:
        return self is TokenKind.SKIP or self is TokenKind.SKIP1


# The two legacy variants differ only on whether a leading ** may match an
# absolute path; both are kept selectable instead of picking one.
class Syntax(str, Enum):
    STANDARD = "standard"
    LEGACY = "legacy"
    LEGACY_RELATIVE = "legacy_relative"

    @classmethod
    def from_str(cls, value: Any) -> Syntax:
        return _SYNTAX_FROM_STR.get(str(value), cls.STANDARD)

    def to_str(self) -> str:
        return self.value


_SYNTAX_FROM_STR: dict[str, Syntax] = {s.value: s for s in Syntax}
