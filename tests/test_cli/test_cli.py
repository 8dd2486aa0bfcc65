"""Tests for the robinson CLI commands."""
from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from robinson import __version__
from robinson.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse HTML and CSS" in result.output
        assert "html" in result.output
        assert "css" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# html command
# ---------------------------------------------------------------------------


class TestHtmlCommand:
    def test_prints_tree(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", str(FIXTURES / "page.html")])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "<html>"
        assert '    <div class="test" id="main">' in lines

    def test_parse_error_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", str(FIXTURES / "broken.html")])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_legacy_quotes(self) -> None:
        runner = CliRunner()
        path = str(FIXTURES / "legacy.html")
        assert runner.invoke(cli, ["html", path]).exit_code == 1
        result = runner.invoke(cli, ["html", "--legacy-quotes", path])
        assert result.exit_code == 0
        assert '<a href="index.html">' in result.output

    def test_missing_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["html", "does-not-exist.html"])
        assert result.exit_code != 0

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.html"
        path.write_bytes(b"<p>caf\xe9</p>")
        runner = CliRunner()
        result = runner.invoke(cli, ["html", str(path)])
        assert result.exit_code == 1
        assert "Parse error" in result.output


# ---------------------------------------------------------------------------
# css command
# ---------------------------------------------------------------------------


class TestCssCommand:
    def test_prints_rules(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["css", str(FIXTURES / "example.css")])
        assert result.exit_code == 0
        assert "Rules: 6" in result.output
        assert "  #main  (1,0,0)" in result.output
        assert "    width: 600px;" in result.output
        assert "    background: #00ccff;" in result.output

    def test_parse_error_exits_1(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["css", str(FIXTURES / "broken.css")])
        assert result.exit_code == 1
        assert "Unrecognized unit 'em'" in result.output

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.css"
        path.write_bytes(b"p { content: caf\xe9; }")
        runner = CliRunner()
        result = runner.invoke(cli, ["css", str(path)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_verbose_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "css", str(FIXTURES / "example.css")])
        assert result.exit_code == 0
