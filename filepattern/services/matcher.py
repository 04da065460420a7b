# Backtracking matcher.
#
# A pattern is matched against the components of a path by a depth-first
# search over (token index, component index), kept on an explicit stack so
# path depth is not limited by the interpreter's recursion limit:
#
#   Lit x    consumes one component equal to x.  A literal "." may also be
#            passed over without consuming anything.
#   Star     consumes one component and captures it.
#   Stars    consumes one component if match_stars splits it; captures one
#            string per gap.  Only the leftmost split is ever tried.
#   Skip     zero components first, then one or more (shortest first).
#   Skip1    one or more components.
#
# Success needs tokens and components to run out together.  _match yields
# every way to do that, in priority order (earlier tokens take as little as
# possible), so the first result is the capture reported by match().
#
# Cost: each Skip tries every split point of what remains, so a pattern with
# k independent skips is O(n^k) in the path length.  The optimiser collapses
# adjacent wildcards before boolean matching, and match() only extracts
# captures from paths already known to match, but patterns such as
# "**/a/**/a/**/a/**/b" against long paths stay exponential.

from __future__ import annotations

from collections.abc import Iterator, Sequence

from filepattern.models.enums import TokenKind
from filepattern.models.pattern import Capture, CompiledPattern, Fragment, Token, Tokens, flatten_fragment
from filepattern.services.compiler import PatternLike, ensure_compiled
from filepattern.services.paths import is_relative_path, split_path

_LITERAL = TokenKind.LITERAL
_STAR = TokenKind.STAR
_SKIP = TokenKind.SKIP
_SKIP1 = TokenKind.SKIP1

type _Parts = tuple[Fragment, ...]


def match_stars(tok: Token, name: str) -> list[str] | None:
    """Split *name* around a Stars token's fixed text, leftmost first.

    ``match_stars(Stars("a", ["b"], ".c"), "axbyb.c") == ["x", "yb"]``.
    """
    prefix = tok.text
    if not name.startswith(prefix):
        return None
    rest = name[len(prefix) :]
    suffix = tok.suffix
    if suffix:
        if not rest.endswith(suffix):
            return None
        rest = rest[: -len(suffix)]
    parts: list[str] = []
    for infix in tok.infixes:
        idx = rest.find(infix)
        if idx < 0:
            return None
        parts.append(rest[:idx])
        rest = rest[idx + len(infix) :]
    parts.append(rest)
    return parts


def match_one(tok: Token, name: str) -> bool:
    """Can *tok* consume the single component *name*?  Skips never answer yes."""
    kind = tok.kind
    if kind is _LITERAL:
        return tok.text == name
    if kind is _STAR:
        return True
    if kind is TokenKind.STARS:
        return match_stars(tok, name) is not None
    return False


# Frame: (token index, component index, parts so far, skip start).  A skip
# start of -1 is an ordinary frame; otherwise pats[pi] is a skip that began at
# component ``start`` and has consumed up to ``ci``.
type _Frame = tuple[int, int, _Parts, int]

_NO_SKIP = -1


def _match(pats: Tokens, comps: Sequence[str]) -> Iterator[_Parts]:
    n = len(comps)
    stack: list[_Frame] = [(0, 0, (), _NO_SKIP)]
    while stack:
        pi, ci, parts, start = stack.pop()

        if start != _NO_SKIP:
            # Finishing the skip here has priority over taking one more.
            if ci < n:
                stack.append((pi, ci + 1, parts, start))
            stack.append((pi + 1, ci, (*parts, tuple(comps[start:ci])), _NO_SKIP))
            continue

        if pi == len(pats):
            if ci == n:
                yield parts
            continue

        tok = pats[pi]
        kind = tok.kind
        if kind is _SKIP:
            stack.append((pi, ci, parts, ci))
            continue
        if kind is _SKIP1:
            if ci < n:
                stack.append((pi, ci + 1, parts, ci))
            continue

        if ci == n:
            continue
        name = comps[ci]
        if kind is _LITERAL:
            if tok.text == ".":
                stack.append((pi + 1, ci, parts, _NO_SKIP))
            if tok.text == name:
                stack.append((pi + 1, ci + 1, parts, _NO_SKIP))
        elif kind is _STAR:
            stack.append((pi + 1, ci + 1, (*parts, name), _NO_SKIP))
        else:
            split = match_stars(tok, name)
            if split is not None:
                stack.append((pi + 1, ci + 1, (*parts, *split), _NO_SKIP))


def matches_tokens(tokens: Tokens, comps: Sequence[str]) -> bool:
    # split_path never returns an empty list, so a lone skip always matches.
    if len(tokens) == 1 and tokens[0].kind.is_skip:
        return True
    return next(_match(tokens, comps), None) is not None


def iter_parts(tokens: Tokens, comps: Sequence[str]) -> Iterator[_Parts]:
    """Every way *tokens* can match *comps*, in priority order."""
    return _match(tokens, comps)


def matches(pattern: PatternLike, path: str) -> bool:
    pat = ensure_compiled(pattern)
    if pat.relative_only and not is_relative_path(path):
        return False
    return matches_tokens(pat.optimised, split_path(path))


def capture_components(pat: CompiledPattern, comps: Sequence[str], path: str) -> Capture | None:
    """Like match(), for a path that is already split into *comps*."""
    parts = _first_parts(pat, comps, path)
    if parts is None:
        return None
    return [flatten_fragment(p) for p in parts]


def _first_parts(pat: CompiledPattern, comps: Sequence[str], path: str) -> _Parts | None:
    if pat.relative_only and not is_relative_path(path):
        return None
    # Cheap rejection on the optimised form before searching for captures.
    if not matches_tokens(pat.optimised, comps):
        return None
    return next(_match(pat.tokens, comps), None)


def match_parts(pattern: PatternLike, path: str) -> _Parts | None:
    """Like match(), but skip captures stay as tuples of components."""
    return _first_parts(ensure_compiled(pattern), split_path(path), path)


def match(pattern: PatternLike, path: str) -> Capture | None:
    """Return what each wildcard matched, or None.

    ``match("**/*.c", "bar/baz/foo.c") == ["bar/baz/", "foo"]``.  Paths may
    use either separator; captures always use ``/``.
    """
    pat = ensure_compiled(pattern)
    return capture_components(pat, split_path(path), path)


def iter_matches(pattern: PatternLike, path: str) -> Iterator[Capture]:
    """All captures for *pattern* against *path*, first one being match()'s."""
    pat = ensure_compiled(pattern)
    if pat.relative_only and not is_relative_path(path):
        return
    for parts in _match(pat.tokens, split_path(path)):
        yield [flatten_fragment(p) for p in parts]
