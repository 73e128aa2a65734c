"""Tests for the gust CLI commands."""

from pathlib import Path

from click.testing import CliRunner

from gust import __version__
from gust.cli.main import cli
from gust.cli.sources import collect_classes


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compile utility class names into CSS" in result.output

    def test_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        for command in ("compile", "check", "inspect"):
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCollectClasses:
    def test_arguments_and_files(self, tmp_path: Path) -> None:
        source = tmp_path / "classes.txt"
        source.write_text("p-4\n  flex   md:p-4\n", encoding="utf-8")
        assert collect_classes(("m-2 p-4",), (str(source),)) == ["m-2", "p-4", "flex", "md:p-4"]


# ---------------------------------------------------------------------------
# compile
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_writes_output_file(self, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(
            cli, ["compile", "p-4", "--tree-shake", "-o", str(out)]
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == ".p-4 {\n  padding: 1rem;\n}\n"
        assert "Wrote 1 rule(s)" in result.output

    def test_minify(self, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(
            cli, ["compile", "p-4", "md:p-4", "--minify", "--tree-shake", "-o", str(out)]
        )
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == (
            ".p-4{padding:1rem}@media (min-width:768px){.md\\:p-4{padding:1rem}}"
        )

    def test_stdout(self) -> None:
        result = CliRunner().invoke(cli, ["compile", "hover:bg-blue-500", "--tree-shake"])
        assert result.exit_code == 0
        assert ".hover\\:bg-blue-500:hover {" in result.output
        assert "1/1 classes recognized" in result.output

    def test_keyframes_by_default(self) -> None:
        result = CliRunner().invoke(cli, ["compile", "p-4"])
        assert "@keyframes spin" in result.output

    def test_unknown_classes_are_skipped(self) -> None:
        result = CliRunner().invoke(cli, ["compile", "p-4", "nope", "--tree-shake"])
        assert result.exit_code == 0
        assert "Skipped: nope" in result.output
        assert "1/2 classes recognized (50.0%)" in result.output

    def test_reads_class_files(self, tmp_path: Path) -> None:
        source = tmp_path / "classes.txt"
        source.write_text("flex items-center\n", encoding="utf-8")
        out = tmp_path / "out.css"
        result = CliRunner().invoke(
            cli, ["compile", "-f", str(source), "--tree-shake", "-o", str(out)]
        )
        assert result.exit_code == 0
        css = out.read_text(encoding="utf-8")
        assert ".flex {" in css
        assert ".items-center {" in css

    def test_source_maps(self, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        CliRunner().invoke(
            cli, ["compile", "p-4", "--tree-shake", "--source-maps", "-o", str(out)]
        )
        assert out.read_text(encoding="utf-8").startswith("/* p-4 */\n")

    def test_palette_restriction(self) -> None:
        result = CliRunner().invoke(
            cli, ["compile", "bg-blue-500", "bg-red-500", "--palette", "blue", "--tree-shake"]
        )
        assert result.exit_code == 0
        assert "Skipped: bg-red-500" in result.output

    def test_invalid_palette_exits_1(self) -> None:
        result = CliRunner().invoke(cli, ["compile", "p-4", "--palette", "brand"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_missing_file(self) -> None:
        result = CliRunner().invoke(cli, ["compile", "-f", "does-not-exist.txt"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_all_recognized(self) -> None:
        result = CliRunner().invoke(cli, ["check", "p-4", "md:flex"])
        assert result.exit_code == 0
        assert "Summary: 2/2 classes recognized (100.0%), 2 rule(s)" in result.output

    def test_reports_failures(self) -> None:
        result = CliRunner().invoke(cli, ["check", "p-4", "nope", "w-[1px"])
        assert result.exit_code == 0
        assert "WARNING [class=nope]: Unrecognized class 'nope'" in result.output
        assert "fix: Close every '['" in result.output
        assert "1/3 classes recognized" in result.output

    def test_strict_fails_on_unrecognized(self) -> None:
        result = CliRunner().invoke(cli, ["check", "--strict", "p-4", "nope"])
        assert result.exit_code == 1

    def test_strict_passes_when_clean(self) -> None:
        result = CliRunner().invoke(cli, ["check", "--strict", "p-4"])
        assert result.exit_code == 0

    def test_lists_referenced_properties(self) -> None:
        result = CliRunner().invoke(cli, ["check", "w-(--my-width)", "bg-(--brand)"])
        assert "Referenced custom properties: --my-width, --brand" in result.output


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_plain_class(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", "p-4"])
        assert result.exit_code == 0
        assert "Selector:  .p-4" in result.output
        assert "Parser:    padding (priority 100, category spacing)" in result.output
        assert "  padding: 1rem;" in result.output
        assert "Variants:" not in result.output

    def test_variants_and_media(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", "md:hover:!p-4"])
        assert result.exit_code == 0
        assert "Segments:  md | hover | !p-4" in result.output
        assert "Variants:  md (responsive), hover (pseudo-class)" in result.output
        assert "Base:      p-4" in result.output
        assert "Important: yes" in result.output
        assert "Media:     (min-width: 768px)" in result.output
        assert "  padding: 1rem !important;" in result.output

    def test_references(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", "w-(--my-width)"])
        assert "References: --my-width" in result.output

    def test_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", "nope"])
        assert result.exit_code == 1
        assert "Parse error: Unrecognized class 'nope'" in result.output
