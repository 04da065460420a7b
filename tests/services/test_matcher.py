from __future__ import annotations

import sys

import pytest

from filepattern.models.enums import Syntax
from filepattern.models.pattern import stars
from filepattern.services.compiler import compile_pattern
from filepattern.services.matcher import iter_matches, match, match_one, match_parts, match_stars, matches


class TestExamples:
    def test_skip_captures_nothing_at_top_level(self) -> None:
        assert match("**/*.c", "foo.c") == ["", "foo"]

    def test_skip_captures_directories_with_trailing_separator(self) -> None:
        assert match("**/*.c", "bar/baz/foo.c") == ["bar/baz/", "foo"]

    def test_wrong_extension(self) -> None:
        assert match("*.c", "file.h") is None

    def test_star_per_component(self) -> None:
        assert match("dir/*/*", "dir/one/file.c") == ["one", "file.c"]

    def test_star_does_not_cross_separator(self) -> None:
        assert match("dir/*/*", "dir/one/two/file.c") is None

    def test_literal_pattern(self) -> None:
        assert match("test.c", "test.c") == []
        assert match("test.c", "other.c") is None

    def test_star_matches_only_current_directory(self) -> None:
        assert matches("*.c", "file.c")
        assert not matches("*.c", "dir/file.c")

    def test_skip_matches_absolute_paths(self) -> None:
        assert matches("**/*.c", "/path/to/file.c")
        assert match("**/*.c", "/path/to/file.c") == ["/path/to/", "file"]


class TestSeparators:
    def test_backslash_path(self) -> None:
        assert match("**/*.c", "bar\\baz\\foo.c") == ["bar/baz/", "foo"]

    def test_backslash_pattern(self) -> None:
        assert matches("dir\\*.c", "dir/x.c")

    def test_leading_separator_must_match(self) -> None:
        assert matches("/x", "/x")
        assert not matches("/x", "x")

    def test_trailing_separator_must_match(self) -> None:
        assert matches("x/", "x/")
        assert not matches("x/", "x")


class TestSkip:
    def test_skip_alone_matches_everything(self) -> None:
        for path in ["", "a", "a/b/c", "/abs"]:
            assert matches("**", path)

    def test_skip_alone_capture(self) -> None:
        assert match("**", "a/b") == ["a/b/"]

    def test_earlier_skip_takes_least(self) -> None:
        assert match("**/**", "a/b") == ["", "a/b/"]

    def test_skip_between_literals(self) -> None:
        assert match("a/**/b", "a/b") == [""]
        assert match("a/**/b", "a/x/y/b") == ["x/y/"]
        assert match("a/**/b", "a/x/c") is None

    def test_star_next_to_skip_needs_a_component(self) -> None:
        assert not matches("a/**/*", "a")
        assert match("a/**/*", "a/b") == ["", "b"]

    def test_skip_fragments_unflattened(self) -> None:
        assert match_parts("**/*.c", "x/y/z.c") == (("x", "y"), "z")
        assert match_parts("**/*.c", "z.c") == ((), "z")

    def test_all_matches_in_priority_order(self) -> None:
        assert list(iter_matches("**/**", "a/b")) == [
            ["", "a/b/"],
            ["a/", "b/"],
            ["a/b/", ""],
        ]

    def test_no_matches(self) -> None:
        assert list(iter_matches("*.c", "a.h")) == []


class TestStars:
    def test_prefix_and_suffix(self) -> None:
        assert match("lib*.so", "libfoo.so") == ["foo"]

    def test_infix_leftmost(self) -> None:
        assert match("*a*", "banana") == ["b", "nana"]

    def test_prefix_and_suffix_do_not_overlap(self) -> None:
        assert match("a*a", "a") is None
        assert match("a*a", "aa") == [""]

    def test_missing_infix(self) -> None:
        assert match("*x*", "abc") is None

    def test_match_stars_direct(self) -> None:
        assert match_stars(stars("a", ["b"], ".c"), "axbyb.c") == ["x", "yb"]
        assert match_stars(stars("", [], ""), "") == [""]

    def test_match_one(self) -> None:
        tok = compile_pattern("*.c").tokens[0]
        assert match_one(tok, "x.c")
        assert not match_one(tok, "x.h")


class TestDotLiteral:
    def test_leading_dot_is_optional(self) -> None:
        assert matches("./a", "a")
        assert matches("./a", "./a")

    def test_dot_needs_a_component_after(self) -> None:
        assert not matches("a/.", "a")


class TestRelativeOnly:
    def test_legacy_relative_rejects_absolute(self) -> None:
        pat = compile_pattern("**/*.c", Syntax.LEGACY_RELATIVE)
        assert matches(pat, "a/b.c")
        assert not matches(pat, "/a/b.c")
        assert match(pat, "/a/b.c") is None

    def test_plain_legacy_accepts_absolute(self) -> None:
        pat = compile_pattern("//*.png", Syntax.LEGACY)
        assert matches(pat, "/foo/bar/baz.png")
        assert match(pat, "/foo/bar/baz.png") == ["/foo/bar/", "baz"]

    @pytest.mark.skipif(sys.platform != "win32", reason="drive letters are only absolute on Windows")
    def test_drive_letter_is_absolute(self) -> None:
        pat = compile_pattern("**", Syntax.LEGACY_RELATIVE)
        assert not matches(pat, "C:\\x")


class TestBooleanAgreesWithCaptures:
    @pytest.mark.parametrize(
        "pattern",
        ["**/*.c", "a/**/*/b", "*/**", "**/*/**", "x*y/**/z", "**/a*b*c", "*", "**/", "/**"],
    )
    @pytest.mark.parametrize(
        "path",
        ["", "a", "a/b", "a/x/b", "x1y/z", "q/abxc", "abc", "/a", "a/", "d/e/f/g"],
    )
    def test_matches_iff_match(self, pattern: str, path: str) -> None:
        assert matches(pattern, path) == (match(pattern, path) is not None)


class TestLongPaths:
    _DEPTH = 3000

    def _path(self, leaf: str) -> str:
        return "/".join(["d"] * self._DEPTH + [leaf])

    def test_matches_deep_path(self) -> None:
        assert matches("**/x.c", self._path("x.c"))
        assert not matches("**/y.c", self._path("x.c"))

    def test_capture_from_deep_path(self) -> None:
        assert match("**/*.c", self._path("x.c")) == ["d/" * self._DEPTH, "x"]

    def test_star_per_component_deep(self) -> None:
        pattern = "/".join(["*"] * (self._DEPTH + 1))
        capture = match(pattern, self._path("x"))
        assert capture is not None
        assert len(capture) == self._DEPTH + 1
        assert capture[-1] == "x"

    def test_first_result_still_leftmost(self) -> None:
        first = next(iter_matches("**/d/**", self._path("x")))
        assert first == ["", "d/" * (self._DEPTH - 1) + "x/"]
