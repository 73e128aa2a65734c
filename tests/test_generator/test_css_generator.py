"""Tests for CssGenerator: the end-to-end class-to-stylesheet pipeline."""

import logging
import re

import pytest

from gust.config import CssGenerationConfig
from gust.errors import ConfigurationError, MalformedArbitraryValue, UnrecognizedClass
from gust.generator import CssGenerator
from gust.model.css import CssProperty
from gust.values import SPACING

SHAKEN = CssGenerationConfig(tree_shake=True)


def css_for(*classes: str, config: CssGenerationConfig = SHAKEN) -> str:
    generator = CssGenerator(config)
    for raw in classes:
        generator.add_class(raw)
    return generator.generate_css()


# ---------------------------------------------------------------------------
# Single classes
# ---------------------------------------------------------------------------


class TestAddClass:
    def test_padding(self) -> None:
        assert css_for("p-4") == ".p-4 {\n  padding: 1rem;\n}\n"

    def test_returns_rule(self) -> None:
        rule = CssGenerator().add_class("m-2")
        assert rule.selector == ".m-2"
        assert rule.properties == [CssProperty("margin", "0.5rem")]
        assert rule.source == "m-2"

    def test_hover(self) -> None:
        css = css_for("hover:bg-blue-500")
        assert css == ".hover\\:bg-blue-500:hover {\n  background-color: #3b82f6;\n}\n"

    def test_breakpoint(self) -> None:
        css = css_for("md:p-4")
        assert css == (
            "@media (min-width: 768px) {\n"
            "  .md\\:p-4 {\n"
            "    padding: 1rem;\n"
            "  }\n"
            "}\n"
        )

    def test_digit_leading_breakpoint_is_escaped(self) -> None:
        assert ".\\32 xl\\:p-4 {" in css_for("2xl:p-4")

    def test_arbitrary_value_is_escaped(self) -> None:
        assert css_for("top-[4px]") == ".top-\\[4px\\] {\n  top: 4px;\n}\n"

    def test_opacity_modifier_is_escaped(self) -> None:
        css = css_for("bg-black/50")
        assert css == ".bg-black\\/50 {\n  background-color: rgba(0, 0, 0, 0.5);\n}\n"

    def test_important_prefix_and_suffix(self) -> None:
        assert "padding: 1rem !important;" in css_for("!p-4")
        assert "padding: 1rem !important;" in css_for("p-4!")
        assert ".\\!p-4 {" in css_for("!p-4")

    def test_space_between_targets_children(self) -> None:
        css = css_for("space-x-4")
        assert css.startswith(".space-x-4 > :not([hidden]) ~ :not([hidden]) {\n")

    def test_group_hover(self) -> None:
        assert css_for("group-hover:text-white").startswith(
            ".group:hover .group-hover\\:text-white {"
        )

    def test_dark_mode_stacks(self) -> None:
        assert css_for("dark:hover:bg-sky-500").startswith(
            ".dark .dark\\:hover\\:bg-sky-500:hover {"
        )

    def test_arbitrary_property(self) -> None:
        assert css_for("[mask-type:luminance]") == (
            ".\\[mask-type\\:luminance\\] {\n  mask-type: luminance;\n}\n"
        )

    def test_data_attribute(self) -> None:
        assert css_for("data-[state=open]:block").startswith(
            ".data-\\[state\\=open\\]\\:block[data-state=open] {"
        )


class TestAddClassErrors:
    def test_unrecognized(self) -> None:
        with pytest.raises(UnrecognizedClass) as exc_info:
            CssGenerator().add_class("not-a-real-class")
        assert exc_info.value.class_name == "not-a-real-class"

    def test_malformed(self) -> None:
        with pytest.raises(MalformedArbitraryValue):
            CssGenerator().add_class("w-[100px")

    def test_unknown_variant(self) -> None:
        with pytest.raises(UnrecognizedClass):
            CssGenerator().add_class("wat:p-4")

    def test_failure_leaves_store_untouched(self) -> None:
        generator = CssGenerator()
        with pytest.raises(UnrecognizedClass):
            generator.add_class("p-nope")
        assert generator.rule_count() == 0

    def test_disabled_category(self) -> None:
        generator = CssGenerator(CssGenerationConfig(include_spacing=False))
        with pytest.raises(UnrecognizedClass):
            generator.add_class("p-4")


# ---------------------------------------------------------------------------
# Batches and idempotence
# ---------------------------------------------------------------------------


class TestAddClasses:
    def test_report(self) -> None:
        report = CssGenerator().add_classes(["p-4", "not-a-real-class", "m-2"])
        assert report.succeeded == 2
        assert report.failed_classes == ["not-a-real-class"]
        assert report.total == 3
        assert report.summary() == "2/3 classes recognized (66.7%)"

    def test_empty_batch(self) -> None:
        report = CssGenerator().add_classes([])
        assert report.coverage == 100.0

    def test_report_diagnostics(self) -> None:
        report = CssGenerator().add_classes(["w-[1px", "nope"])
        diags = report.diagnostics()
        assert [d.rule for d in diags] == ["malformed-arbitrary-value", "unrecognized-class"]
        assert diags[0].fix is not None
        assert diags[1].class_name == "nope"

    def test_non_finite_alpha_is_a_per_class_failure(self) -> None:
        generator = CssGenerator(SHAKEN)
        report = generator.add_classes(
            ["p-4", "bg-black/[inf%]", "text-red-500/[1e999%]", "m-2"]
        )
        assert report.succeeded == 2
        assert report.failed_classes == ["bg-black/[inf%]", "text-red-500/[1e999%]"]
        css = generator.generate_css()
        assert ".p-4 {" in css
        assert ".m-2 {" in css

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="gust.generator"):
            CssGenerator().add_classes(["p-4"])
        assert "1/1 classes recognized" in caplog.text

    def test_idempotent(self) -> None:
        generator = CssGenerator(SHAKEN)
        generator.add_classes(["p-4", "md:p-4"])
        once = generator.generate_css()
        generator.add_classes(["p-4", "md:p-4"])
        assert generator.generate_css() == once
        assert generator.rule_count() == 2

    def test_deterministic(self) -> None:
        classes = ["flex", "md:p-4", "hover:bg-red-500", "animate-spin", "sm:m-2"]
        assert css_for(*classes) == css_for(*classes)


class TestScaleCoverage:
    @pytest.mark.parametrize(
        "prefix,prop", [("p", "padding"), ("m", "margin"), ("w", "width"), ("h", "height")]
    )
    @pytest.mark.parametrize("token,value", list(SPACING.items()))
    def test_every_spacing_token(self, prefix: str, prop: str, token: str, value: str) -> None:
        assert CssGenerator().class_to_properties(f"{prefix}-{token}") == [CssProperty(prop, value)]


class TestMediaOrder:
    def test_breakpoints_sort_small_to_large(self) -> None:
        css = css_for("lg:p-4", "print:hidden", "sm:p-2", "md:p-1")
        queries = re.findall(r"@media ([^{]+) \{", css)
        assert queries == [
            "(min-width: 640px)",
            "(min-width: 768px)",
            "(min-width: 1024px)",
            "print",
        ]

    def test_base_rules_come_first(self) -> None:
        css = css_for("md:p-4", "p-2")
        assert css.index(".p-2 {") < css.index("@media")


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class TestOutput:
    def test_minified(self) -> None:
        generator = CssGenerator(SHAKEN)
        generator.add_classes(["p-4", "md:p-4"])
        assert generator.generate_minified_css() == (
            ".p-4{padding:1rem}@media (min-width:768px){.md\\:p-4{padding:1rem}}"
        )

    def test_minified_important(self) -> None:
        generator = CssGenerator(SHAKEN)
        generator.add_class("!p-4")
        assert generator.generate_minified_css() == ".\\!p-4{padding:1rem!important}"

    def test_render_follows_config(self) -> None:
        generator = CssGenerator(CssGenerationConfig(minify=True, tree_shake=True))
        generator.add_class("p-4")
        assert generator.render() == ".p-4{padding:1rem}"

    def test_keyframes_preamble_by_default(self) -> None:
        generator = CssGenerator()
        generator.add_class("p-4")
        css = generator.generate_css()
        assert css.startswith("@keyframes spin {")
        assert css.endswith(".p-4 {\n  padding: 1rem;\n}\n")

    def test_tree_shake_keeps_used_keyframes(self) -> None:
        css = css_for("animate-spin")
        assert css.count("@keyframes") == 1
        assert css.startswith("@keyframes spin {")

    def test_source_maps(self) -> None:
        css = css_for("p-4", config=CssGenerationConfig(tree_shake=True, source_maps=True))
        assert css.startswith("/* p-4 */\n.p-4 {")


# ---------------------------------------------------------------------------
# Custom properties
# ---------------------------------------------------------------------------


class TestCustomProperties:
    def test_root_block(self) -> None:
        generator = CssGenerator(SHAKEN)
        generator.add_custom_property("brand", "#3b82f6")
        generator.add_class("p-4")
        assert generator.generate_css().startswith(":root {\n  --brand: #3b82f6;\n}\n")

    def test_name_normalization(self) -> None:
        generator = CssGenerator()
        generator.add_custom_property("--gap", "1rem")
        generator.add_custom_property("-pad", "2rem")
        assert generator.store.custom_properties == {"--gap": "1rem", "--pad": "2rem"}

    def test_references_are_recorded(self) -> None:
        generator = CssGenerator()
        generator.add_classes(["w-(--my-width)", "text-(length:--size)", "bg-(--brand)/50"])
        assert generator.referenced_properties == ["--my-width", "--size", "--brand"]

    def test_references_are_not_declared(self) -> None:
        generator = CssGenerator(SHAKEN)
        generator.add_class("w-(--my-width)")
        assert generator.generate_css() == ".w-\\(--my-width\\) {\n  width: var(--my-width);\n}\n"


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------


class TestSession:
    def test_class_to_properties_does_not_register(self) -> None:
        generator = CssGenerator()
        assert generator.class_to_properties("p-4") == [CssProperty("padding", "1rem")]
        assert generator.rule_count() == 0

    def test_compile(self) -> None:
        compiled = CssGenerator().compile("md:hover:p-4")
        assert compiled.selector == ".md\\:hover\\:p-4:hover"
        assert compiled.media_query == "(min-width: 768px)"
        assert compiled.parser.name == "padding"

    def test_rules(self) -> None:
        generator = CssGenerator()
        generator.add_classes(["md:p-4", "p-2"])
        assert [r.selector for r in generator.rules()] == [".p-2", ".md\\:p-4"]

    def test_set_config(self) -> None:
        generator = CssGenerator()
        generator.add_class("p-4")
        generator.set_config(CssGenerationConfig(include_spacing=False))
        with pytest.raises(UnrecognizedClass):
            generator.add_class("p-2")
        assert generator.rule_count() == 1

    def test_set_config_validates(self) -> None:
        generator = CssGenerator()
        with pytest.raises(ConfigurationError):
            generator.set_config(CssGenerationConfig(color_palettes=("brand",)))
        assert generator.config == CssGenerationConfig()

    def test_invalid_config_at_construction(self) -> None:
        with pytest.raises(ConfigurationError):
            CssGenerator(CssGenerationConfig(color_palettes=("brand",)))

    def test_warnings_kept(self) -> None:
        generator = CssGenerator(CssGenerationConfig(minify=True, source_maps=True))
        assert [d.rule for d in generator.warnings] == ["check_source_maps_minify"]

    def test_merge(self) -> None:
        left, right = CssGenerator(SHAKEN), CssGenerator(SHAKEN)
        left.add_class("p-4")
        right.add_classes(["m-2", "p-4"])
        left.merge(right)
        assert [r.selector for r in left.rules()] == [".p-4", ".m-2"]

    def test_clear(self) -> None:
        generator = CssGenerator(SHAKEN)
        generator.add_classes(["p-4", "md:p-4"])
        generator.add_custom_property("x", "1")
        generator.clear()
        assert generator.rule_count() == 0
        assert generator.generate_css() == ""

    def test_custom_breakpoints(self) -> None:
        config = CssGenerationConfig(
            tree_shake=True,
            custom_breakpoints=(("tablet", "(min-width: 700px)"), ("desk", "(min-width: 1200px)")),
        )
        css = css_for("desk:p-4", "tablet:p-4", config=config)
        assert css.index("(min-width: 700px)") < css.index("(min-width: 1200px)")
