from __future__ import annotations

from typing import Protocol

from filepattern.lex.legacy import LegacyLexer
from filepattern.lex.standard import StandardLexer, classify_component
from filepattern.models.enums import Syntax
from filepattern.models.pattern import Tokens


class Lexer(Protocol):
    syntax: Syntax

    def lex(self, pattern: str) -> Tokens: ...

    def relative_only(self, pattern: str) -> bool: ...


def create_lexer(syntax: Syntax | str) -> Lexer:
    """Create a lexer by syntax.

    Valid names: ``standard``, ``legacy``, ``legacy_relative``.
    Raises ``ValueError`` for unknown names.
    """
    if syntax == Syntax.STANDARD:
        return StandardLexer()
    if syntax == Syntax.LEGACY:
        return LegacyLexer()
    if syntax == Syntax.LEGACY_RELATIVE:
        return LegacyLexer(relative=True)
    msg = f"Unknown syntax: {syntax}. Use: standard, legacy, legacy_relative."
    raise ValueError(msg)


__all__ = [
    "LegacyLexer",
    "Lexer",
    "StandardLexer",
    "classify_component",
    "create_lexer",
]
