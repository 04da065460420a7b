from __future__ import annotations

import functools

from filepattern.lex import create_lexer
from filepattern.models.enums import Syntax
from filepattern.models.pattern import CompiledPattern
from filepattern.services.optimize import optimise

type PatternLike = CompiledPattern | str


@functools.lru_cache(maxsize=1024)
def compile_pattern(pattern: str, syntax: Syntax = Syntax.STANDARD) -> CompiledPattern:
    """Parse *pattern* once; every string compiles, so this never fails.

    Cached so repeated matching against the same pattern text does not
    re-lex it.
    """
    lexer = create_lexer(syntax)
    tokens = lexer.lex(pattern)
    return CompiledPattern(
        source=pattern,
        syntax=lexer.syntax,
        tokens=tokens,
        optimised=optimise(tokens),
        relative_only=lexer.relative_only(pattern),
    )


def ensure_compiled(pattern: PatternLike, syntax: Syntax = Syntax.STANDARD) -> CompiledPattern:
    if isinstance(pattern, CompiledPattern):
        return pattern
    return compile_pattern(pattern, syntax)
