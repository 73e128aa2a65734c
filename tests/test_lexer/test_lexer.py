"""Tests for the class lexer."""

import pytest

from gust.errors import MalformedArbitraryValue, UnrecognizedClass
from gust.lexer import tokenize, unbalanced_at


# ---------------------------------------------------------------------------
# Segmenting
# ---------------------------------------------------------------------------


class TestSegments:
    def test_plain_class(self) -> None:
        tokens = tokenize("p-4")
        assert tokens.segments == ("p-4",)
        assert tokens.variant_segments == ()
        assert tokens.base == "p-4"

    def test_stacked_variants(self) -> None:
        tokens = tokenize("md:dark:hover:bg-sky-500")
        assert tokens.segments == ("md", "dark", "hover", "bg-sky-500")
        assert tokens.variant_segments == ("md", "dark", "hover")
        assert tokens.base == "bg-sky-500"

    def test_colon_inside_brackets_does_not_split(self) -> None:
        tokens = tokenize("bg-[url(http://x.test/a.png)]")
        assert tokens.segments == ("bg-[url(http://x.test/a.png)]",)

    def test_arbitrary_variant_with_colon(self) -> None:
        tokens = tokenize("[&:hover]:p-4")
        assert tokens.segments == ("[&:hover]", "p-4")

    def test_arbitrary_property(self) -> None:
        tokens = tokenize("hover:[mask-type:luminance]")
        assert tokens.base == "[mask-type:luminance]"

    def test_custom_property_with_hint(self) -> None:
        tokens = tokenize("text-(length:--size)")
        assert tokens.segments == ("text-(length:--size)",)

    def test_raw_is_kept(self) -> None:
        assert tokenize("md:p-4").raw == "md:p-4"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_unclosed_bracket(self) -> None:
        with pytest.raises(MalformedArbitraryValue) as exc_info:
            tokenize("w-[100px")
        assert exc_info.value.column == 2
        assert exc_info.value.class_name == "w-[100px"

    def test_unopened_paren(self) -> None:
        with pytest.raises(MalformedArbitraryValue):
            tokenize("w--my-width)")

    def test_mismatched_pair(self) -> None:
        with pytest.raises(MalformedArbitraryValue):
            tokenize("w-[100px)")

    def test_empty_class(self) -> None:
        with pytest.raises(UnrecognizedClass):
            tokenize("")

    def test_surrounding_whitespace(self) -> None:
        with pytest.raises(UnrecognizedClass):
            tokenize(" p-4")

    def test_trailing_colon(self) -> None:
        with pytest.raises(UnrecognizedClass):
            tokenize("hover:")

    def test_double_colon(self) -> None:
        with pytest.raises(UnrecognizedClass):
            tokenize("hover::p-4")

    def test_leading_colon(self) -> None:
        with pytest.raises(UnrecognizedClass):
            tokenize(":p-4")


class TestUnbalancedAt:
    def test_balanced(self) -> None:
        assert unbalanced_at("bg-[calc(100%-2px)]") is None

    def test_reports_first_unclosed_opener(self) -> None:
        assert unbalanced_at("a-[b(c") == 2

    def test_reports_stray_closer(self) -> None:
        assert unbalanced_at("a-b]") == 3
