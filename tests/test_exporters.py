"""Tests for exporters."""

import json

from graph.model import DependencyGraph, SourceFile
from exporters.tree_exporter import to_tree
from exporters.dot_exporter import to_dot
from exporters.json_exporter import to_json


def _graph(paths, edges, language="javascript"):
    graph = DependencyGraph()
    for path in paths:
        graph.add_node(SourceFile(path=path, language=language, dep_count=0))
    for source, target in edges:
        graph.add_edge(source, target, "./" + target.rsplit(".", 1)[0])
    return graph


class TestTreeExporter:
    """Tests for text tree exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        output = to_tree(DependencyGraph(), color=False)

        assert output == "\n0 files, 0 local deps"

    def test_simple_tree(self):
        """Test simple tree structure."""
        graph = _graph(["index.js", "a.js", "b.js"], [("index.js", "a.js"), ("index.js", "b.js")])

        output = to_tree(graph, color=False)

        assert output.splitlines()[:3] == ["index.js", "├── a.js", "└── b.js"]
        assert "3 files, 2 local deps" in output

    def test_nested_prefix(self):
        """Grandchildren are indented under a vertical bar."""
        graph = _graph(
            ["index.js", "a.js", "b.js", "c.js"],
            [("index.js", "a.js"), ("a.js", "c.js"), ("index.js", "b.js")],
        )

        lines = to_tree(graph, color=False).splitlines()

        assert lines[:4] == ["index.js", "├── a.js", "│   └── c.js", "└── b.js"]

    def test_ascii_style(self):
        """Test pure ASCII tree style."""
        graph = _graph(["index.js", "a.js", "b.js"], [("index.js", "a.js"), ("index.js", "b.js")])

        output = to_tree(graph, color=False, style="ascii")

        assert "|-- a.js" in output
        assert "\\-- b.js" in output
        assert "├" not in output
        assert "└" not in output
        assert "│" not in output

    def test_circular_marker(self):
        """Test that cycles are marked instead of expanded forever."""
        graph = _graph(["a.js", "b.js"], [("a.js", "b.js"), ("b.js", "a.js")])

        lines = to_tree(graph, color=False).splitlines()

        assert lines[:4] == ["a.js", "└── b.js", "    └── a.js", "        (circular)"]

    def test_marker_for_file_with_only_external_edges(self):
        """A repeated file with any dependency gets a marker, a leaf does not."""
        graph = _graph(
            ["index.js", "a.js", "b.js", "shared.js", "leaf.js"],
            [("index.js", "a.js"), ("index.js", "b.js"), ("a.js", "shared.js"), ("b.js", "shared.js"),
             ("a.js", "leaf.js"), ("b.js", "leaf.js")],
        )
        graph.add_edge("shared.js", "[ext] react", "react", "external")

        lines = to_tree(graph, color=False).splitlines()

        assert lines[:9] == [
            "index.js",
            "├── a.js",
            "│   ├── shared.js",
            "│   └── leaf.js",
            "└── b.js",
            "    ├── shared.js",
            "    │   (circular)",
            "    └── leaf.js",
            "",
        ]

    def test_deep_chain(self):
        """A long import chain renders without hitting the recursion limit."""
        paths = [f"f{i}.js" for i in range(1200)]
        graph = _graph(paths, list(zip(paths, paths[1:])))

        lines = to_tree(graph, color=False).splitlines()

        assert lines[0] == "f0.js"
        assert lines[1] == "└── f1.js"
        assert lines[1199] == "    " * 1198 + "└── f1199.js"
        assert lines[1200] == ""
        assert lines[1201] == "1200 files, 1199 local deps"

    def test_multiple_roots(self):
        """Each root gets its own tree separated by a blank line."""
        graph = _graph(["index.js", "cli.js", "shared.js"], [("index.js", "shared.js"), ("cli.js", "shared.js")])

        lines = to_tree(graph, color=False).splitlines()

        assert lines[:2] == ["index.js", "└── shared.js"]
        assert lines[2] == ""
        assert lines[3:5] == ["cli.js", "└── shared.js"]

    def test_summary_lines(self):
        """Externals and unresolved imports are summarised."""
        graph = _graph(["index.js"], [])
        graph.add_external("react")
        graph.add_external("express")
        graph.add_unresolved("index.js", "./gone")

        output = to_tree(graph, color=False)

        assert "External: express, react" in output
        assert "Unresolved: ./gone" in output

    def test_color(self):
        """ANSI colours appear only when enabled."""
        graph = _graph(["main.py"], [], language="python")
        graph.add_unresolved("main.py", ".gone")

        colored = to_tree(graph, color=True)
        plain = to_tree(graph, color=False)

        assert "\x1b[32mmain.py\x1b[0m" in colored
        assert "\x1b[33mUnresolved\x1b[0m" in colored
        assert "\x1b[" not in plain


class TestDotExporter:
    """Tests for Graphviz DOT exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        output = to_dot(DependencyGraph())

        assert output.startswith('digraph "Dependencies" {')
        assert output.endswith("}")

    def test_title(self):
        """The digraph is named after the title."""
        assert to_dot(DependencyGraph(), title="my-app").startswith('digraph "my-app" {')

    def test_nodes_and_edges(self):
        """Test exporting a simple graph."""
        graph = _graph(["index.js", "a.js"], [("index.js", "a.js")])

        output = to_dot(graph)

        assert '"index.js" [label="index.js", color="#f7df1e"];' in output
        assert '"index.js" -> "a.js";' in output

    def test_python_color(self):
        """Python nodes use their own colour."""
        graph = _graph(["main.py"], [], language="python")

        assert 'color="#3776ab"' in to_dot(graph)

    def test_external_dashed(self):
        """External targets are dashed nodes with dashed edges."""
        graph = _graph(["index.js"], [])
        graph.add_edge("index.js", "[ext] react", "react", "external")
        graph.add_edge("index.js", "[builtin] fs", "fs", "builtin")

        output = to_dot(graph)

        assert '"[ext] react" [label="[ext] react", style=dashed];' in output
        assert '"index.js" -> "[ext] react" [style=dashed];' in output
        assert '"index.js" -> "[builtin] fs" [style=dashed];' in output

    def test_quotes_escaped(self):
        """Quotes in names do not break the output."""
        graph = _graph(['we"ird.js'], [])

        assert '"we\\"ird.js"' in to_dot(graph)


class TestJSONExporter:
    """Tests for JSON exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        data = json.loads(to_json(DependencyGraph()))

        assert data == {"nodes": [], "edges": [], "externals": [], "builtins": [], "unresolved": []}

    def test_field_names(self):
        """Test the field names consumers rely on."""
        graph = _graph(["index.js", "a.js"], [("index.js", "a.js"), ("a.js", "b.js")])
        graph.add_unresolved("a.js", "./gone")

        data = json.loads(to_json(graph))

        assert data["nodes"][0] == {"path": "index.js", "language": "javascript", "depCount": 0}
        assert data["edges"][0] == {"from": "index.js", "to": "a.js", "specifier": "./a", "type": "local"}
        assert data["edges"][1]["to"] == "b.js"
        assert data["unresolved"] == [{"from": "a.js", "specifier": "./gone"}]

    def test_indent(self):
        """Test custom indentation."""
        output = to_json(DependencyGraph(), indent=4)

        assert '\n    "nodes"' in output
