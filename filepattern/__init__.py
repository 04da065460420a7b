from __future__ import annotations

from filepattern.models.enums import Syntax, TokenKind
from filepattern.models.pattern import (
    Capture,
    CompiledPattern,
    Fragment,
    SubstituteError,
    SubstituteErrorCode,
    SubstituteResult,
    Token,
)
from filepattern.services.batch import match_many
from filepattern.services.compiler import compile_pattern
from filepattern.services.matcher import iter_matches, match, match_parts, matches
from filepattern.services.shape import arity, compatible, fingerprint, simple
from filepattern.services.substitute import substitute, translate
from filepattern.services.walk import DeferredWalk, LiteralWalk, WalkNode, WalkStep, build_walk, step_walk

__all__ = [
    "Capture",
    "CompiledPattern",
    "DeferredWalk",
    "Fragment",
    "LiteralWalk",
    "SubstituteError",
    "SubstituteErrorCode",
    "SubstituteResult",
    "Syntax",
    "Token",
    "TokenKind",
    "WalkNode",
    "WalkStep",
    "arity",
    "build_walk",
    "compatible",
    "compile_pattern",
    "fingerprint",
    "iter_matches",
    "match",
    "match_many",
    "match_parts",
    "matches",
    "simple",
    "step_walk",
    "substitute",
    "translate",
]
