"""Tests for the fluent class builder."""

import pytest

from gust.builder import ClassBuilder, color_token, format_value
from gust.config import CssGenerationConfig
from gust.generator import CssGenerator


class TestFormatValue:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (4, "4"),
            (0.5, "0.5"),
            ("1/2", "1/2"),
            ("auto", "auto"),
            ("4px", "[4px]"),
            ("50%", "[50%]"),
            ("#0af", "[#0af]"),
            ("0 0 2px red", "[0_0_2px_red]"),
            ("calc(100%-2px)", "[calc(100%-2px)]"),
            ("--gutter", "(--gutter)"),
            ("[3px]", "[3px]"),
            ("(--x)", "(--x)"),
        ],
    )
    def test_format(self, value: int | float | str, expected: str) -> None:
        assert format_value(value) == expected

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            format_value(True)


class TestColorToken:
    def test_shade(self) -> None:
        assert color_token("blue", 500) == "blue-500"

    def test_opacity(self) -> None:
        assert color_token("black", opacity=50) == "black/50"

    def test_literal(self) -> None:
        assert color_token("#0af", opacity="--alpha") == "[#0af]/(--alpha)"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class TestClassBuilder:
    def test_chain(self) -> None:
        built = (
            ClassBuilder()
            .padding(4)
            .background_color("blue", 500, opacity=50)
            .hover("scale-105")
            .build()
        )
        assert built == "p-4 bg-blue-500/50 hover:scale-105"

    def test_sides(self) -> None:
        builder = ClassBuilder().padding(2, "x").margin(4, "top", negative=True)
        assert builder.classes() == ["px-2", "-mt-4"]

    def test_unknown_side(self) -> None:
        with pytest.raises(ValueError, match="Unknown side"):
            ClassBuilder().padding(2, "middle")

    def test_inset(self) -> None:
        builder = ClassBuilder().inset(0).inset(4, "x").inset("1/2", "left", negative=True)
        assert builder.classes() == ["inset-0", "inset-x-4", "-left-1/2"]

    def test_bare_utilities(self) -> None:
        builder = ClassBuilder().border().rounded().shadow().ring().transition()
        assert builder.build() == "border rounded shadow ring transition"

    def test_border_side(self) -> None:
        assert ClassBuilder().border(2, "bottom").build() == "border-b-2"

    def test_arbitrary_values(self) -> None:
        builder = ClassBuilder().width("37px").width("--my-width").text_size("14px")
        assert builder.classes() == ["w-[37px]", "w-(--my-width)", "text-[14px]"]

    def test_deduplicates(self) -> None:
        builder = ClassBuilder().add("p-4 m-2").padding(4).add("m-2")
        assert builder.classes() == ["p-4", "m-2"]
        assert len(builder) == 2

    def test_variants(self) -> None:
        builder = (
            ClassBuilder()
            .responsive("md", "p-4", "flex")
            .dark("bg-gray-900")
            .group_hover("text-white")
            .aria("checked", "bg-blue-500")
            .data("state", "block", value="open")
            .data("active", "font-bold")
        )
        assert builder.classes() == [
            "md:p-4",
            "md:flex",
            "dark:bg-gray-900",
            "group-hover:text-white",
            "aria-checked:bg-blue-500",
            "data-[state=open]:block",
            "data-active:font-bold",
        ]

    def test_motion(self) -> None:
        builder = (
            ClassBuilder()
            .translate("x", "1/2", negative=True)
            .rotate(45)
            .scale(105)
            .duration(300)
            .animate("spin")
        )
        assert str(builder) == "-translate-x-1/2 rotate-45 scale-105 duration-300 animate-spin"

    def test_custom_property_names(self) -> None:
        builder = ClassBuilder().custom("brand", "#3b82f6").custom("--gap", "1rem")
        assert builder.custom_properties() == {"--brand": "#3b82f6", "--gap": "1rem"}


class TestApplyTo:
    def test_feeds_generator(self) -> None:
        generator = CssGenerator(CssGenerationConfig(tree_shake=True))
        report = (
            ClassBuilder()
            .custom("brand", "#3b82f6")
            .display("flex")
            .justify("between")
            .items("center")
            .gap(4)
            .background_color("--brand")
            .apply_to(generator)
        )
        assert report.succeeded == 5
        assert not report.failed
        css = generator.generate_css()
        assert css.startswith(":root {\n  --brand: #3b82f6;\n}\n")
        assert "background-color: var(--brand);" in css
        assert generator.referenced_properties == ["--brand"]

    def test_every_builder_class_compiles(self) -> None:
        builder = (
            ClassBuilder()
            .padding(4, "y")
            .margin("auto", "x")
            .space("y", 2)
            .size(10)
            .height("screen")
            .position("relative")
            .z_index(10)
            .grid_cols(3)
            .font_weight("semibold")
            .text_color("gray", 700)
            .border_color("red", 500, opacity=25)
            .ring_color("blue", 500)
            .opacity(75)
            .focus("ring-2")
            .active("scale-95")
        )
        report = builder.apply_to(CssGenerator())
        assert report.failed_classes == []
        assert report.succeeded == len(builder)
