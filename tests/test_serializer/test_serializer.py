"""Tests for pretty and minified stylesheet serialization."""

import re

from gust.model.css import CssProperty
from gust.serializer import serialize, used_keyframes
from gust.store import RuleStore
from gust.values.motion import KEYFRAMES


def _store() -> RuleStore:
    store = RuleStore()
    store.upsert(".p-4", None, [CssProperty("padding", "1rem")], source="p-4")
    store.upsert(
        ".md\\:p-4",
        "(min-width: 768px)",
        [CssProperty("padding", "1rem")],
        source="md:p-4",
        rank=(0, 1),
    )
    return store


def _strip_whitespace(css: str) -> str:
    return re.sub(r"\s+", "", css)


# ---------------------------------------------------------------------------
# Pretty
# ---------------------------------------------------------------------------


class TestPretty:
    def test_empty_store(self) -> None:
        assert serialize(RuleStore(), tree_shake=True) == ""

    def test_single_rule(self) -> None:
        store = RuleStore()
        store.upsert(".p-4", None, [CssProperty("padding", "1rem")])
        assert serialize(store, tree_shake=True) == ".p-4 {\n  padding: 1rem;\n}\n"

    def test_media_block(self) -> None:
        assert serialize(_store(), tree_shake=True) == (
            ".p-4 {\n  padding: 1rem;\n}\n"
            "\n"
            "@media (min-width: 768px) {\n"
            "  .md\\:p-4 {\n"
            "    padding: 1rem;\n"
            "  }\n"
            "}\n"
        )

    def test_important(self) -> None:
        store = RuleStore()
        store.upsert(".a", None, [CssProperty("color", "red", important=True)])
        assert "color: red !important;" in serialize(store, tree_shake=True)

    def test_root_comes_before_rules(self) -> None:
        store = _store()
        store.custom_property("--brand", "#3b82f6")
        css = serialize(store, tree_shake=True)
        assert css.startswith(":root {\n  --brand: #3b82f6;\n}\n\n.p-4 {")

    def test_source_maps(self) -> None:
        css = serialize(_store(), tree_shake=True, source_maps=True)
        assert "/* p-4 */\n.p-4 {" in css
        assert "  /* md:p-4 */\n  .md\\:p-4 {" in css

    def test_source_map_comment_cannot_close_early(self) -> None:
        store = RuleStore()
        store.upsert(".x", None, [CssProperty("a", "b")], source="[content:'*/']")
        css = serialize(store, tree_shake=True, source_maps=True)
        assert css.count("*/") == 1


# ---------------------------------------------------------------------------
# Keyframes
# ---------------------------------------------------------------------------


class TestKeyframes:
    def test_every_keyframe_by_default(self) -> None:
        css = serialize(RuleStore())
        for name in KEYFRAMES:
            assert f"@keyframes {name} {{" in css

    def test_pretty_keyframe_format(self) -> None:
        store = RuleStore()
        store.upsert(".animate-spin", None, [CssProperty("animation", "spin 1s linear infinite")])
        css = serialize(store, tree_shake=True)
        assert css.startswith(
            "@keyframes spin {\n  to {\n    transform: rotate(360deg);\n  }\n}\n\n.animate-spin {"
        )

    def test_tree_shake_keeps_referenced(self) -> None:
        store = RuleStore()
        store.upsert(".a", None, [CssProperty("animation", "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite")])
        store.upsert(".b", None, [CssProperty("animation-name", "fade-in")])
        assert used_keyframes(store) == ["ping", "fade-in"]

    def test_tree_shake_ignores_other_properties(self) -> None:
        store = RuleStore()
        store.upsert(".a", None, [CssProperty("transition-property", "spin")])
        assert used_keyframes(store) == []

    def test_minified_keyframes(self) -> None:
        store = RuleStore()
        store.upsert(".s", None, [CssProperty("animation", "spin 1s linear infinite")])
        css = serialize(store, minify=True, tree_shake=True)
        assert css.startswith("@keyframes spin{to{transform:rotate(360deg)}}")

    def test_minified_keyframe_selector_lists(self) -> None:
        store = RuleStore()
        store.upsert(".p", None, [CssProperty("animation", "ping 1s")])
        css = serialize(store, minify=True, tree_shake=True)
        assert css.startswith("@keyframes ping{75%,100%{transform:scale(2);opacity:0}}")


# ---------------------------------------------------------------------------
# Minified
# ---------------------------------------------------------------------------


class TestMinified:
    def test_rules_and_media(self) -> None:
        assert serialize(_store(), minify=True, tree_shake=True) == (
            ".p-4{padding:1rem}@media (min-width:768px){.md\\:p-4{padding:1rem}}"
        )

    def test_multiple_declarations(self) -> None:
        store = RuleStore()
        store.upsert(
            ".a",
            None,
            [CssProperty("outline", "2px solid transparent"), CssProperty("outline-offset", "2px")],
        )
        assert serialize(store, minify=True, tree_shake=True) == (
            ".a{outline:2px solid transparent;outline-offset:2px}"
        )

    def test_root(self) -> None:
        store = RuleStore()
        store.custom_property("--gap", "1rem")
        assert serialize(store, minify=True, tree_shake=True) == ":root{--gap:1rem}"

    def test_never_carries_comments(self) -> None:
        css = serialize(_store(), minify=True, tree_shake=True, source_maps=True)
        assert "/*" not in css

    def test_equivalent_to_pretty(self) -> None:
        store = _store()
        store.custom_property("--brand", "red")
        pretty = serialize(store)
        minified = serialize(store, minify=True)
        assert _strip_whitespace(pretty).replace(";}", "}") == _strip_whitespace(minified)
