"""Tests for the brickify CLI commands."""
from __future__ import annotations

import json

from click.testing import CliRunner

from brickify import __version__
from brickify.cli.main import cli


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("convert", "inspect", "serve"):
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_serve_help(self) -> None:
        result = CliRunner().invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "--port" in result.output


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


class TestConvertCommand:
    def test_convert_to_stdout(self, tmp_path) -> None:
        html = _write(tmp_path, "page.html", '<h1 class="title">Hello</h1>')
        css = _write(tmp_path, "page.css", ".title { color: red; }")
        result = CliRunner().invoke(cli, ["convert", html, "--css", css])
        assert result.exit_code == 0
        document = json.loads(result.stdout)
        assert document["content"][0]["name"] == "heading"
        assert document["globalClasses"][0]["name"] == "title"

    def test_convert_to_file(self, tmp_path) -> None:
        html = _write(tmp_path, "page.html", "<div><p>x</p></div>")
        out = tmp_path / "out.json"
        result = CliRunner().invoke(cli, ["convert", html, "-o", str(out)])
        assert result.exit_code == 0
        assert "Wrote 2 elements" in result.output
        assert json.loads(out.read_text())["content"][0]["name"] == "div"

    def test_js_and_no_js(self, tmp_path) -> None:
        html = _write(tmp_path, "page.html", "<div></div>")
        js = _write(tmp_path, "app.js", "run();")
        with_js = json.loads(CliRunner().invoke(cli, ["convert", html, "--js", js]).stdout)
        without = json.loads(CliRunner().invoke(cli, ["convert", html, "--js", js, "--no-js"]).stdout)
        assert [n["name"] for n in with_js["content"]] == ["div", "code"]
        assert [n["name"] for n in without["content"]] == ["div"]

    def test_inline_styles_option(self, tmp_path) -> None:
        html = _write(tmp_path, "page.html", '<div style="color: red"></div>')
        result = CliRunner().invoke(cli, ["convert", html, "--inline-styles", "inline"])
        node = json.loads(result.stdout)["content"][0]
        assert node["settings"]["_attributes"][0]["name"] == "style"

    def test_invalid_choice(self, tmp_path) -> None:
        html = _write(tmp_path, "page.html", "<div></div>")
        result = CliRunner().invoke(cli, ["convert", html, "--target", "bogus"])
        assert result.exit_code == 2

    def test_missing_file(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["convert", str(tmp_path / "nope.html")])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_summary(self, tmp_path) -> None:
        css = _write(
            tmp_path,
            "site.css",
            ":root { --brand: red; } .a, .b:hover { color: red; } "
            "@keyframes spin { to { opacity: 0; } }",
        )
        result = CliRunner().invoke(cli, ["inspect", css])
        assert result.exit_code == 0
        assert "Stylesheet: site.css" in result.output
        assert "Rules:      3" in result.output
        assert ".a  kind=simple  specificity=10  declarations=1" in result.output
        assert ".b:hover  kind=pseudo  specificity=20" in result.output
        assert "--brand: red" in result.output
        assert "  spin" in result.output

    def test_parse_error(self, tmp_path) -> None:
        css = _write(tmp_path, "bad.css", ".a { color: red;")
        result = CliRunner().invoke(cli, ["inspect", css])
        assert result.exit_code == 1
        assert "Parse error" in result.output
