from __future__ import annotations

from collections.abc import Iterable

from filepattern.models.enums import TokenKind
from filepattern.models.pattern import SKIP, SKIP1, STAR, Token, Tokens

_STAR = TokenKind.STAR
_SKIP = TokenKind.SKIP
_SKIP1 = TokenKind.SKIP1


def _canonical_run(run: list[Token]) -> list[Token]:
    """Collapse a run of adjacent Star/Skip/Skip1 tokens.

    The run only constrains how many components it consumes: at least
    ``minimum`` of them, and with no upper bound when a skip is present.
    ``[Skip1, Star, ...]`` is the one spelling kept for each such bound.
    """
    minimum = sum(1 for t in run if t.kind is not _SKIP)
    if all(t.kind is _STAR for t in run):
        return run
    if minimum == 0:
        return [SKIP]
    return [SKIP1] + [STAR] * (minimum - 1)


def optimise(tokens: Iterable[Token]) -> Tokens:
    """Canonicalise wildcard adjacency without changing what matches.

    ``Skip Skip -> Skip``, ``Star Skip -> Skip1``, ``Skip Star -> Skip1``
    and so on, applied to fixpoint.  Wildcard slots may disappear, so the
    result is for boolean matching and walking, never for captures.
    """
    out: list[Token] = []
    run: list[Token] = []
    for tok in tokens:
        if tok.kind is _STAR or tok.kind.is_skip:
            run.append(tok)
            continue
        if run:
            out.extend(_canonical_run(run))
            run = []
        out.append(tok)
    if run:
        out.extend(_canonical_run(run))
    return tuple(out)
