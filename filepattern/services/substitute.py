from __future__ import annotations

from collections.abc import Sequence

from result import Err, Ok

from filepattern.models.enums import TokenKind
from filepattern.models.pattern import SubstituteError, SubstituteErrorCode, SubstituteResult
from filepattern.services.compiler import PatternLike, ensure_compiled
from filepattern.services.matcher import match
from filepattern.services.paths import SEP, render_path
from filepattern.services.shape import arity, fingerprint


def _split_skip(value: str) -> list[str]:
    # Undo the "a/b/" flattening of a skip capture: a trailing separator
    # closes the last component, so "" is no components at all.
    parts = value.split(SEP)
    if parts[-1] == "":
        parts.pop()
    return parts


def substitute(pattern: PatternLike, capture: Sequence[str]) -> SubstituteResult:
    """Put a capture from match() back into a pattern of the same arity.

    ``substitute("**/*.c", ["dir/", "file"]) == Ok("dir/file.c")``.  The
    capture must have exactly ``arity(pattern)`` values; anything else is an
    ``ARITY_MISMATCH`` error rather than padding or truncating.
    """
    pat = ensure_compiled(pattern)
    values = tuple(capture)
    expected = arity(pat)
    if len(values) != expected:
        return Err(
            SubstituteError(
                code=SubstituteErrorCode.ARITY_MISMATCH,
                pattern=pat.source,
                expected=expected,
                actual=len(values),
                values=values,
                message=(
                    f"Pattern {pat.source!r} expects {expected} values, "
                    f"but got {len(values)}, namely {list(values)!r}."
                ),
            )
        )

    out: list[str] = []
    i = 0
    for tok in pat.tokens:
        kind = tok.kind
        if kind is TokenKind.LITERAL:
            out.append(tok.text)
        elif kind is TokenKind.STAR:
            out.append(values[i])
            i += 1
        elif kind.is_skip:
            out.extend(_split_skip(values[i]))
            i += 1
        else:
            width = len(tok.infixes) + 1
            fixed = (*tok.infixes, tok.suffix)
            out.append(tok.text + "".join(v + f for v, f in zip(values[i : i + width], fixed, strict=True)))
            i += width
    return Ok(render_path(out))


def translate(source: PatternLike, target: PatternLike, path: str) -> SubstituteResult:
    """Match *path* against *source* and substitute the capture into *target*.

    ``translate("src/**/*.c", "obj/**/*.o", "src/a/b.c") == Ok("obj/a/b.o")``.
    The two patterns must be compatible: a ``**`` capture put into a ``*``
    slot would produce a path the target can never match, so a shape
    difference is an ``INCOMPATIBLE`` error even when the arities agree.
    """
    src = ensure_compiled(source)
    dst = ensure_compiled(target)
    src_shape = fingerprint(src)
    if src_shape != fingerprint(dst):
        return Err(
            SubstituteError(
                code=SubstituteErrorCode.INCOMPATIBLE,
                pattern=dst.source,
                expected=arity(dst),
                actual=len(src_shape),
                values=(),
                message=f"Patterns {src.source!r} and {dst.source!r} have different wildcards.",
            )
        )
    capture = match(src, path)
    if capture is None:
        return Err(
            SubstituteError(
                code=SubstituteErrorCode.NO_MATCH,
                pattern=src.source,
                expected=len(src_shape),
                actual=0,
                values=(),
                message=f"Pattern {src.source!r} does not match {path!r}.",
            )
        )
    return substitute(dst, capture)
