"""JSON exporter for dependency graphs (machine-friendly format)."""

import json

from graph.model import DependencyGraph


def to_json(graph: DependencyGraph, indent: int = 2) -> str:
    """
    Convert a dependency graph to JSON format.

    The document has the keys `nodes`, `edges`, `externals`, `builtins` and
    `unresolved`, as produced by `DependencyGraph.to_dict`.

    Args:
        graph: The dependency graph to export.
        indent: JSON indentation level.

    Returns:
        JSON string representation of the graph.
    """
    return json.dumps(graph.to_dict(), indent=indent)
