# Lexer for the historical "//" syntax.
#
# A doubled separator is a skip of its own, so the pattern text is first cut
# into lexemes (string, "/" or "//") and then parsed with two flags:
#
#   seen_str     a string lexeme has gone past; before that, "/" produces an
#                empty literal (absolute pattern) and "///" produces Skip1.
#   after_slash  at the start or right after "/"; a pattern that ends here
#                gets a trailing empty literal.
#
#   "//x"   -> [Skip, Lit "x"]          "///"   -> [Skip1, Lit ""]
#   "x///y" -> [Lit "x", Skip, Lit "y"] "////"  -> [Skip, Skip]

from __future__ import annotations

from filepattern.lex.standard import classify_component
from filepattern.models.enums import Syntax
from filepattern.models.pattern import SKIP, SKIP1, Token, Tokens, lit
from filepattern.services.paths import is_relative_pattern, is_separator

_STR = 0
_SLASH = 1
_SLASH_SLASH = 2

type _Lexeme = tuple[int, str]


def _lexemes(pattern: str) -> list[_Lexeme]:
    out: list[_Lexeme] = []
    i = 0
    n = len(pattern)
    while i < n:
        if is_separator(pattern[i]):
            if i + 1 < n and is_separator(pattern[i + 1]):
                out.append((_SLASH_SLASH, ""))
                i += 2
            else:
                out.append((_SLASH, ""))
                i += 1
            continue
        j = i
        while j < n and not is_separator(pattern[j]):
            j += 1
        out.append((_STR, pattern[i:j]))
        i = j
    return out


class LegacyLexer:
    """``//`` as an extra skip, on top of ``*`` and ``**``.

    With *relative* set, a pattern starting with ``**`` only matches relative
    paths; without it, any leading skip may consume an absolute prefix.
    """

    def __init__(self, relative: bool = False) -> None:
        self._relative = relative
        self.syntax = Syntax.LEGACY_RELATIVE if relative else Syntax.LEGACY

    def lex(self, pattern: str) -> Tokens:
        lexemes = _lexemes(pattern)
        tokens: list[Token] = []
        seen_str = False
        after_slash = True
        i = 0
        while i < len(lexemes):
            kind, text = lexemes[i]
            if kind == _STR:
                tokens.append(classify_component(text))
                seen_str = True
                after_slash = False
            elif kind == _SLASH_SLASH:
                if not seen_str and i + 1 < len(lexemes) and lexemes[i + 1][0] == _SLASH:
                    tokens.append(SKIP1)
                    after_slash = True
                    i += 2
                    continue
                tokens.append(SKIP)
                after_slash = False
            else:
                if not seen_str:
                    tokens.append(lit(""))
                after_slash = True
            i += 1
        if after_slash:
            tokens.append(lit(""))
        return tuple(tokens)

    def relative_only(self, pattern: str) -> bool:
        return self._relative and is_relative_pattern(pattern)
