"""Tests for the cssbuilder CLI."""

import json

import pytest
from click.testing import CliRunner

from cssbuilder import __version__
from cssbuilder.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _write(tmp_path, name, document) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selectors" in result.output

    def test_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        for name in ("build", "kinds", "render", "combine"):
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build / kinds
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_builds_compound(self, runner):
        result = runner.invoke(
            cli, ["build", "-p", "element=div", "-p", "id=main", "-p", "class=container"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "div#main.container"

    def test_value_may_contain_equals(self, runner):
        result = runner.invoke(cli, ["build", "-p", "element=a", "-p", 'attr=href$=".png"'])
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]'

    def test_out_of_order(self, runner):
        result = runner.invoke(cli, ["build", "-p", "class=a", "-p", "element=div"])
        assert result.exit_code == 1
        assert "Selector error" in result.output

    def test_unknown_kind(self, runner):
        result = runner.invoke(cli, ["build", "-p", "tag=div"])
        assert result.exit_code == 1
        assert "Unknown selector part kind" in result.output

    def test_missing_equals(self, runner):
        result = runner.invoke(cli, ["build", "-p", "div"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_debug_logging_option(self, runner):
        result = runner.invoke(cli, ["--log-level", "debug", "build", "-p", "id=x"])
        assert result.exit_code == 0
        assert "#x" in result.output


class TestKindsCommand:
    def test_lists_kinds_in_order(self, runner):
        result = runner.invoke(cli, ["kinds"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("1  element")
        assert lines[-1].startswith("6  pseudoElement")
        assert "::value" in lines[-1]
        assert "(at most once)" in lines[1]


# ---------------------------------------------------------------------------
# render / combine
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_render(self, runner, tmp_path):
        doc = _write(
            tmp_path,
            "sel.json",
            {
                "combine": [
                    {"parts": [["element", "div"], ["id", "main"]]},
                    "+",
                    {"parts": [["element", "table"], ["id", "data"]]},
                ]
            },
        )
        result = runner.invoke(cli, ["render", doc])
        assert result.exit_code == 0
        assert result.output.strip() == "div#main + table#data"

    def test_render_json(self, runner, tmp_path):
        doc = _write(tmp_path, "sel.json", {"parts": [["element", "a"], ["class", "b"]]})
        result = runner.invoke(cli, ["render", doc, "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "text": "a.b",
            "last_kind": "class",
            "rank_history": [1, 3],
        }

    def test_render_invalid_document(self, runner, tmp_path):
        doc = _write(tmp_path, "bad.json", {"parts": [["id", "a"], ["id", "b"]]})
        result = runner.invoke(cli, ["render", doc])
        assert result.exit_code == 1
        assert "bad.json" in result.output

    def test_render_not_utf8(self, runner, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b"\xff\xfe{")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Selector error in latin.json" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_render_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["render", str(tmp_path / "nope.json")])
        assert result.exit_code == 2


class TestCombineCommand:
    def test_default_is_descendant(self, runner, tmp_path):
        left = _write(tmp_path, "l.json", {"parts": [["element", "tr"]]})
        right = _write(tmp_path, "r.json", {"parts": [["element", "td"]]})
        result = runner.invoke(cli, ["combine", left, right])
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == "tr   td"

    def test_explicit_combinator(self, runner, tmp_path):
        left = _write(tmp_path, "l.json", {"parts": [["element", "ul"]]})
        right = _write(tmp_path, "r.json", {"parts": [["element", "li"]]})
        result = runner.invoke(cli, ["combine", left, right, "-c", ">"])
        assert result.exit_code == 0
        assert result.output.strip() == "ul > li"
