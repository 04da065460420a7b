from __future__ import annotations

from filepattern.models.enums import Syntax, TokenKind
from filepattern.models.pattern import SKIP, SKIP1, STAR, flatten_fragment, lit, stars


class TestFlattenFragment:
    def test_string_unchanged(self) -> None:
        assert flatten_fragment("abc") == "abc"

    def test_components_get_trailing_separator(self) -> None:
        assert flatten_fragment(("a", "b")) == "a/b/"

    def test_no_components(self) -> None:
        assert flatten_fragment(()) == ""

    def test_empty_component(self) -> None:
        assert flatten_fragment(("",)) == "/"


class TestToken:
    def test_repr(self) -> None:
        assert repr(lit("x")) == "Lit('x')"
        assert repr(stars("a", ["b"], ".c")) == "Stars('a', ['b'], '.c')"
        assert repr(SKIP) == "Skip"
        assert repr(SKIP1) == "Skip1"
        assert repr(STAR) == "Star"

    def test_equality_by_value(self) -> None:
        assert lit("x") == lit("x")
        assert stars("a", ["b"], "") == stars("a", ("b",), "")
        assert lit("*") != STAR

    def test_is_literal(self) -> None:
        assert lit("").is_literal
        assert not STAR.is_literal


class TestEnums:
    def test_is_skip(self) -> None:
        assert TokenKind.SKIP.is_skip
        assert TokenKind.SKIP1.is_skip
        assert not TokenKind.STAR.is_skip

    def test_syntax_from_str(self) -> None:
        assert Syntax.from_str("legacy") is Syntax.LEGACY
        assert Syntax.from_str("nope") is Syntax.STANDARD
        assert Syntax.LEGACY_RELATIVE.to_str() == "legacy_relative"
