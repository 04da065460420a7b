from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from result import Result

from filepattern.models.enums import Syntax, TokenKind


@dataclass(slots=True, frozen=True)
class Token:
    """One component of a compiled pattern.

    ``text`` is the literal text for LITERAL tokens and the fixed prefix for
    STARS tokens.  A STARS token for ``a*b*c*.txt`` is
    ``Token(STARS, "a", ("b", "c"), ".txt")`` and fills
    ``len(infixes) + 1`` wildcard slots.  No field of a STARS token ever
    contains a separator.
    """

    kind: TokenKind
    text: str = ""
    infixes: tuple[str, ...] = ()
    suffix: str = ""

    @property
    def is_literal(self) -> bool:
        return self.kind is TokenKind.LITERAL

    def __repr__(self) -> str:
        if self.kind is TokenKind.LITERAL:
            return f"Lit({self.text!r})"
        if self.kind is TokenKind.STARS:
            return f"Stars({self.text!r}, {list(self.infixes)!r}, {self.suffix!r})"
        return self.kind.name.title()


STAR = Token(TokenKind.STAR)
SKIP = Token(TokenKind.SKIP)
SKIP1 = Token(TokenKind.SKIP1)
DOT = Token(TokenKind.LITERAL, ".")


def lit(text: str) -> Token:
    return Token(TokenKind.LITERAL, text)


def stars(prefix: str, infixes: tuple[str, ...] | list[str], suffix: str) -> Token:
    return Token(TokenKind.STARS, prefix, tuple(infixes), suffix)


type Tokens = tuple[Token, ...]

# What one wildcard consumed: a substring for * and Stars slots, or the whole
# components consumed by a ** (flattened as "a/b/" by flatten_fragment).
type Fragment = str | tuple[str, ...]

type Capture = list[str]


def flatten_fragment(fragment: Fragment) -> str:
    if isinstance(fragment, str):
        return fragment
    return "".join(f"{part}/" for part in fragment)


@dataclass(slots=True, frozen=True)
class CompiledPattern:
    source: str
    syntax: Syntax
    tokens: Tokens
    # Canonical form used for boolean matching and walking only; it may
    # drop wildcard slots, so captures always come from ``tokens``.
    optimised: Tokens
    relative_only: bool = False

    def __str__(self) -> str:
        return self.source


class SubstituteErrorCode(str, Enum):
    ARITY_MISMATCH = "arity_mismatch"
    INCOMPATIBLE = "incompatible"
    NO_MATCH = "no_match"


@dataclass(slots=True, frozen=True)
class SubstituteError:
    code: SubstituteErrorCode
    pattern: str
    expected: int
    actual: int
    values: tuple[str, ...]
    message: str


SubstituteResult = Result[str, SubstituteError]
