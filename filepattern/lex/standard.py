from __future__ import annotations

from filepattern.models.enums import Syntax
from filepattern.models.pattern import SKIP, STAR, Token, Tokens, lit, stars
from filepattern.services.paths import split_path


def classify_component(component: str) -> Token:
    """Turn the text between two separators into a token."""
    if component == "**":
        return SKIP
    if component == "*":
        return STAR
    if "*" not in component:
        return lit(component)
    prefix, *infixes, suffix = component.split("*")
    return stars(prefix, infixes, suffix)


class StandardLexer:
    """``*`` and ``**`` only.  Leading/trailing separators give empty literals."""

    syntax = Syntax.STANDARD

    def lex(self, pattern: str) -> Tokens:
        return tuple(classify_component(c) for c in split_path(pattern))

    def relative_only(self, pattern: str) -> bool:
        return False
