"""Tests for variant lookup and class resolution."""

import pytest

from gust.config import CssGenerationConfig
from gust.errors import UnrecognizedClass
from gust.variants import VariantKind, VariantToken, lookup_variant, resolve, split_important

DEFAULT = CssGenerationConfig()


# ---------------------------------------------------------------------------
# VariantToken
# ---------------------------------------------------------------------------


class TestVariantToken:
    def test_selector_or_media_not_both(self) -> None:
        with pytest.raises(ValueError):
            VariantToken("x", VariantKind.PSEUDO_CLASS, selector="&:x", media_query="(x)")

    def test_needs_one(self) -> None:
        with pytest.raises(ValueError):
            VariantToken("x", VariantKind.PSEUDO_CLASS)


# ---------------------------------------------------------------------------
# lookup_variant
# ---------------------------------------------------------------------------


class TestLookupVariant:
    def test_pseudo_class(self) -> None:
        token = lookup_variant("hover", DEFAULT)
        assert token.kind is VariantKind.PSEUDO_CLASS
        assert token.selector == "&:hover"

    def test_structural_pseudo_class(self) -> None:
        assert lookup_variant("odd", DEFAULT).selector == "&:nth-child(odd)"
        assert lookup_variant("first", DEFAULT).selector == "&:first-child"

    def test_pseudo_element(self) -> None:
        token = lookup_variant("before", DEFAULT)
        assert token.is_pseudo_element
        assert token.selector == "&::before"

    def test_breakpoint(self) -> None:
        token = lookup_variant("md", DEFAULT)
        assert token.kind is VariantKind.RESPONSIVE
        assert token.media_query == "(min-width: 768px)"
        assert token.is_media

    def test_arbitrary_breakpoints(self) -> None:
        assert lookup_variant("min-[900px]", DEFAULT).media_query == "(min-width: 900px)"
        assert lookup_variant("max-[600px]", DEFAULT).media_query == "(max-width: 600px)"

    def test_dark_is_a_parent_selector(self) -> None:
        token = lookup_variant("dark", DEFAULT)
        assert token.kind is VariantKind.DARK
        assert token.selector == ".dark &"
        assert token.media_query is None

    def test_group_and_peer(self) -> None:
        assert lookup_variant("group-hover", DEFAULT).selector == ".group:hover &"
        assert lookup_variant("peer-checked", DEFAULT).selector == ".peer:checked ~ &"

    def test_device_queries(self) -> None:
        assert lookup_variant("motion-reduce", DEFAULT).media_query == (
            "(prefers-reduced-motion: reduce)"
        )
        assert lookup_variant("print", DEFAULT).media_query == "print"

    def test_attributes(self) -> None:
        assert lookup_variant("data-active", DEFAULT).selector == "&[data-active]"
        assert lookup_variant("data-[state=open]", DEFAULT).selector == "&[data-state=open]"
        assert lookup_variant("aria-checked", DEFAULT).selector == '&[aria-checked="true"]'
        assert lookup_variant("aria-[sort=ascending]", DEFAULT).selector == (
            "&[aria-sort=ascending]"
        )

    def test_direction(self) -> None:
        assert lookup_variant("rtl", DEFAULT).selector == '[dir="rtl"] &'

    def test_arbitrary_selector(self) -> None:
        assert lookup_variant("[&_p]", DEFAULT).selector == "& p"
        assert lookup_variant("[&>*]", DEFAULT).selector == "&>*"

    def test_arbitrary_media(self) -> None:
        token = lookup_variant("[@media(min-width:900px)]", DEFAULT)
        assert token.media_query == "(min-width:900px)"

    def test_arbitrary_selector_needs_ampersand(self) -> None:
        assert lookup_variant("[p]", DEFAULT) is None

    def test_unknown(self) -> None:
        assert lookup_variant("hovering", DEFAULT) is None
        assert lookup_variant("group-bogus", DEFAULT) is None

    def test_custom_breakpoints_replace_defaults(self) -> None:
        config = CssGenerationConfig(custom_breakpoints=(("tablet", "(min-width: 700px)"),))
        assert lookup_variant("tablet", config).media_query == "(min-width: 700px)"
        assert lookup_variant("md", config) is None


class TestVariantToggles:
    def test_disabled_dark(self) -> None:
        config = CssGenerationConfig(include_dark_mode=False)
        assert lookup_variant("dark", config) is None

    def test_disabled_responsive(self) -> None:
        config = CssGenerationConfig(include_responsive=False)
        assert lookup_variant("md", config) is None

    def test_disabled_interactive(self) -> None:
        config = CssGenerationConfig(include_interactive=False)
        assert lookup_variant("hover", config) is None
        assert lookup_variant("[&_p]", config) is None

    def test_disabled_device(self) -> None:
        config = CssGenerationConfig(include_device_variants=False)
        assert lookup_variant("print", config) is None


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_no_variants(self) -> None:
        resolved = resolve("p-4")
        assert resolved.variants == ()
        assert resolved.base == "p-4"
        assert resolved.selector() == ".p-4"
        assert resolved.media_query is None

    def test_hover(self) -> None:
        resolved = resolve("hover:bg-blue-500")
        assert resolved.base == "bg-blue-500"
        assert resolved.selector() == ".hover\\:bg-blue-500:hover"

    def test_breakpoint_keeps_selector(self) -> None:
        resolved = resolve("md:p-4")
        assert resolved.selector() == ".md\\:p-4"
        assert resolved.media_query == "(min-width: 768px)"

    def test_full_stacking(self) -> None:
        resolved = resolve("md:dark:hover:bg-sky-500")
        assert [v.name for v in resolved.variants] == ["md", "dark", "hover"]
        assert resolved.selector() == ".dark .md\\:dark\\:hover\\:bg-sky-500:hover"
        assert resolved.media_query == "(min-width: 768px)"

    def test_group_wraps_inner_state(self) -> None:
        resolved = resolve("group-hover:focus:underline")
        assert resolved.selector() == ".group:hover .group-hover\\:focus\\:underline:focus"

    def test_pseudo_element_goes_last(self) -> None:
        resolved = resolve("before:hover:p-1")
        assert resolved.selector() == ".before\\:hover\\:p-1:hover::before"

    def test_child_selector_precedes_pseudo_element(self) -> None:
        resolved = resolve("after:space-x-2")
        assert resolved.selector(" > *") == ".after\\:space-x-2 > *::after"

    def test_arbitrary_variant(self) -> None:
        resolved = resolve("[&_p]:mt-4")
        assert resolved.selector() == ".\\[\\&_p\\]\\:mt-4 p"

    def test_universal_child(self) -> None:
        assert resolve("*:p-2").selector() == ":is(.\\*\\:p-2 > *)"

    def test_media_queries_join(self) -> None:
        resolved = resolve("md:motion-safe:p-2")
        assert resolved.media_query == (
            "(min-width: 768px) and (prefers-reduced-motion: no-preference)"
        )

    def test_media_type_comes_first(self) -> None:
        assert resolve("md:print:hidden").media_query == "print and (min-width: 768px)"

    def test_duplicate_query_is_not_repeated(self) -> None:
        assert resolve("md:md:p-2").media_query == "(min-width: 768px)"

    def test_unknown_variant(self) -> None:
        with pytest.raises(UnrecognizedClass, match="Unknown variant 'foo'"):
            resolve("foo:p-4")

    def test_disabled_variant_is_unknown(self) -> None:
        with pytest.raises(UnrecognizedClass):
            resolve("dark:p-4", CssGenerationConfig(include_dark_mode=False))

    def test_important(self) -> None:
        resolved = resolve("md:!p-4")
        assert resolved.base == "p-4"
        assert resolved.important


class TestSplitImportant:
    def test_prefix(self) -> None:
        assert split_important("!p-4") == ("p-4", True)

    def test_suffix(self) -> None:
        assert split_important("p-4!") == ("p-4", True)

    def test_plain(self) -> None:
        assert split_important("p-4") == ("p-4", False)

    def test_lone_bang(self) -> None:
        assert split_important("!") == ("!", False)
