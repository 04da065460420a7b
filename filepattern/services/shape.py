from __future__ import annotations

from collections.abc import Sequence

from filepattern.models.enums import TokenKind
from filepattern.services.compiler import PatternLike, ensure_compiled

type Fingerprint = tuple[TokenKind, ...]


def fingerprint(pattern: PatternLike) -> Fingerprint:
    """The wildcard slots of *pattern*, in order, with literals dropped.

    A Stars token contributes one STAR per gap, Skip1 counts as SKIP.
    """
    out: list[TokenKind] = []
    for tok in ensure_compiled(pattern).tokens:
        kind = tok.kind
        if kind is TokenKind.STAR:
            out.append(TokenKind.STAR)
        elif kind.is_skip:
            out.append(TokenKind.SKIP)
        elif kind is TokenKind.STARS:
            out.extend([TokenKind.STAR] * (len(tok.infixes) + 1))
    return tuple(out)


def arity(pattern: PatternLike) -> int:
    return len(fingerprint(pattern))


def simple(pattern: PatternLike) -> bool:
    """True if *pattern* has no wildcards at all, so it only matches itself."""
    return not fingerprint(pattern)


def compatible(patterns: Sequence[PatternLike]) -> bool:
    """Do all *patterns* have the same wildcards in the same order?"""
    if not patterns:
        return True
    first = fingerprint(patterns[0])
    return all(fingerprint(p) == first for p in patterns[1:])
