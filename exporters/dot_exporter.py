"""Graphviz DOT exporter for dependency graphs."""

from typing import List, Set

from graph.model import LOCAL, DependencyGraph


LANGUAGE_COLORS = {
    "python": "#3776ab",
    "javascript": "#f7df1e",
}


def to_dot(graph: DependencyGraph, title: str = "Dependencies") -> str:
    """
    Convert a dependency graph to Graphviz DOT syntax.

    Args:
        graph: The dependency graph to export.
        title: Name of the digraph.

    Returns:
        DOT string.
    """
    lines: List[str] = [
        f"digraph {_dot_id(title)} {{",
        "  rankdir=LR;",
        '  node [shape=box, style=rounded, fontname="Helvetica"];',
        "",
    ]

    for node in graph.nodes:
        color = LANGUAGE_COLORS.get(node.language, "#999999")
        lines.append(f'  {_dot_id(node.path)} [label={_dot_id(node.path)}, color="{color}"];')

    # External and builtin targets are synthesized labels, drawn dashed
    seen: Set[str] = set()
    for edge in graph.edges:
        if edge.kind != LOCAL and edge.target not in seen:
            seen.add(edge.target)
            lines.append(f"  {_dot_id(edge.target)} [label={_dot_id(edge.target)}, style=dashed];")

    lines.append("")

    for edge in graph.edges:
        style = "" if edge.kind == LOCAL else " [style=dashed]"
        lines.append(f"  {_dot_id(edge.source)} -> {_dot_id(edge.target)}{style};")

    lines.append("}")
    return "\n".join(lines)


def _dot_id(value: str) -> str:
    """Quote a string as a DOT identifier."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
