"""Tests for the command line interface."""

import json

import pytest

from cli import main, parse_args


@pytest.fixture
def project(tmp_path):
    files = {
        "index.js": "const a = require('./a');\nconst express = require('express');\nconst fs = require('fs');",
        "a.js": "require('./b');\nrequire('./missing');",
        "b.js": "",
    }
    for name, content in files.items():
        (tmp_path / name).write_text(content, encoding="utf-8")
    return tmp_path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Unset options are None so config files can fill them."""
        parsed = parse_args([])

        assert parsed.root == "."
        assert parsed.format is None
        assert parsed.entries is None
        assert parsed.depth is None
        assert parsed.color is None

    def test_repeatable_entries(self):
        """-e can be given several times."""
        parsed = parse_args(["-e", "a.js", "--entry", "b.js"])

        assert parsed.entries == ["a.js", "b.js"]

    def test_depth(self):
        """Depth accepts integers and infinity."""
        assert parse_args(["-d", "2"]).depth == 2
        assert parse_args(["--depth", "inf"]).depth == float("inf")

    def test_bad_depth(self):
        """Negative or non-numeric depths are rejected."""
        with pytest.raises(SystemExit):
            parse_args(["-d", "-1"])
        with pytest.raises(SystemExit):
            parse_args(["-d", "deep"])

    def test_version(self, capsys):
        """--version prints the version and exits."""
        with pytest.raises(SystemExit) as exc:
            parse_args(["--version"])

        assert exc.value.code == 0
        assert "deptree" in capsys.readouterr().out


class TestMain:
    """Tests for the main entry point."""

    def test_json_output(self, project, capsys):
        """Test JSON output for a discovered entry."""
        assert main([str(project), "-f", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [n["path"] for n in data["nodes"]] == ["index.js", "a.js", "b.js"]
        assert data["externals"] == ["express"]
        assert data["builtins"] == ["fs"]
        assert data["unresolved"] == [{"from": "a.js", "specifier": "./missing"}]

    def test_tree_output(self, project, capsys):
        """Tree output is uncoloured when stdout is not a terminal."""
        assert main([str(project), "-e", "index.js"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("index.js\n")
        assert "3 files, 2 local deps" in out
        assert "\x1b[" not in out

    def test_dot_output(self, project, capsys):
        """DOT output is titled after the directory."""
        assert main([str(project), "-f", "dot", "--external"]) == 0

        out = capsys.readouterr().out
        assert out.startswith(f'digraph "{project.name}" {{')
        assert '"[ext] express"' in out

    def test_depth_option(self, project, capsys):
        """--depth limits scanning."""
        assert main([str(project), "-f", "json", "-d", "0"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [n["path"] for n in data["nodes"]] == ["index.js"]

    def test_output_file(self, project, tmp_path, capsys):
        """Output can be written to a file."""
        target = tmp_path / "out.json"

        assert main([str(project), "-f", "json", "-o", str(target)]) == 0

        assert json.loads(target.read_text(encoding="utf-8"))["nodes"]
        assert "Output written to" in capsys.readouterr().err

    def test_config_file(self, project, capsys):
        """Settings from .deptree.yaml apply unless overridden."""
        (project / ".deptree.yaml").write_text("format: json\nbuiltin: true\n", encoding="utf-8")

        assert main([str(project)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert any(e["type"] == "builtin" for e in data["edges"])

        assert main([str(project), "-f", "dot"]) == 0
        assert capsys.readouterr().out.startswith("digraph")

    def test_invalid_config(self, project, capsys):
        """A bad config file is reported."""
        (project / ".deptree.yaml").write_text("format: xml\n", encoding="utf-8")

        assert main([str(project)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_broken_pyproject_does_not_block(self, project, capsys):
        """A malformed pyproject.toml of another tool does not stop a scan."""
        (project / "pyproject.toml").write_text("[tool.black\nline-length = 100\n", encoding="utf-8")

        assert main([str(project), "-f", "json"]) == 0
        assert json.loads(capsys.readouterr().out)["nodes"]

    def test_no_entries(self, tmp_path, capsys):
        """Missing entry points are an error."""
        assert main([str(tmp_path)]) == 1
        assert "No entry points found" in capsys.readouterr().err

    def test_not_a_directory(self, tmp_path, capsys):
        """The root must be a directory."""
        assert main([str(tmp_path / "nope")]) == 1
        assert "is not a directory" in capsys.readouterr().err
