"""Text tree exporter for dependency graphs (human-friendly format)."""

import posixpath
from typing import Dict, List, Set, Tuple

from graph.model import DependencyGraph


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "
UNICODE_VERTICAL = "│   "
UNICODE_SPACE = "    "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "
ASCII_VERTICAL = "|   "
ASCII_SPACE = "    "

RESET = "\x1b[0m"
DIM = "\x1b[2m"
YELLOW = "\x1b[33m"

EXTENSION_COLORS = {
    ".js": "\x1b[33m",
    ".jsx": "\x1b[33m",
    ".mjs": "\x1b[33m",
    ".cjs": "\x1b[33m",
    ".ts": "\x1b[36m",
    ".tsx": "\x1b[36m",
    ".mts": "\x1b[36m",
    ".cts": "\x1b[36m",
    ".py": "\x1b[32m",
}


def to_tree(
    graph: DependencyGraph,
    color: bool = True,
    style: str = "tree",
) -> str:
    """
    Convert a dependency graph to a text tree followed by a summary.

    Every root file (one no local edge points to) starts its own tree.
    Children follow local edges in discovery order. A file that was already
    expanded is printed again but not expanded twice; if it has dependencies
    a "(circular)" marker is shown under it instead.

    Args:
        graph: The dependency graph to export.
        color: If True, colour paths by extension with ANSI escapes.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).

    Returns:
        Tree string.
    """
    if style == "ascii":
        chars = (ASCII_BRANCH, ASCII_LAST, ASCII_VERTICAL, ASCII_SPACE)
    else:
        chars = (UNICODE_BRANCH, UNICODE_LAST, UNICODE_VERTICAL, UNICODE_SPACE)

    children: Dict[str, List[str]] = {}
    for edge in graph.iter_local_edges():
        children.setdefault(edge.source, []).append(edge.target)
    # Any edge counts, so a file importing only packages still gets a marker
    sources = {edge.source for edge in graph.edges}

    lines: List[str] = []
    visited: Set[str] = set()
    roots = graph.get_roots()

    for i, root_node in enumerate(roots):
        if i > 0:
            lines.append("")
        _render_tree(
            root=root_node,
            children=children,
            sources=sources,
            chars=chars,
            visited=visited,
            lines=lines,
            color=color,
        )

    lines.append("")
    lines.extend(_summary(graph, color))
    return "\n".join(lines)


def _render_tree(
    root: str,
    children: Dict[str, List[str]],
    sources: Set[str],
    chars: Tuple[str, str, str, str],
    visited: Set[str],
    lines: List[str],
    color: bool,
) -> None:
    """
    Render the tree under root, expanding each node on its first visit only.

    Uses an explicit stack of (node, prefix, connector, child prefix) frames
    so that long import chains do not hit the recursion limit.
    """
    branch, last, vertical, space = chars
    stack: List[Tuple[str, str, str, str]] = [(root, "", "", "")]

    while stack:
        node, prefix, connector, child_prefix = stack.pop()
        name = _colorize(node) if color else node
        lines.append(f"{prefix}{connector}{name}")

        if node in visited:
            if node in sources:
                marker = f"{DIM}(circular){RESET}" if color else "(circular)"
                lines.append(f"{child_prefix}{marker}")
            continue
        visited.add(node)

        targets = children.get(node, [])
        # Pushed in reverse so the first target is rendered first
        for i in range(len(targets) - 1, -1, -1):
            is_last = i == len(targets) - 1
            stack.append((
                targets[i],
                child_prefix,
                last if is_last else branch,
                child_prefix + (space if is_last else vertical),
            ))


def _summary(graph: DependencyGraph, color: bool) -> List[str]:
    """Build the summary lines printed under the trees."""
    local_count = sum(1 for _ in graph.iter_local_edges())
    lines = [f"{len(graph)} files, {local_count} local deps"]

    if graph.externals:
        lines.append(f"External: {', '.join(graph.externals)}")

    if graph.unresolved:
        label = f"{YELLOW}Unresolved{RESET}" if color else "Unresolved"
        specifiers = ", ".join(u.specifier for u in graph.unresolved)
        lines.append(f"{label}: {specifiers}")

    return lines


def _colorize(path: str) -> str:
    """Wrap a path in the ANSI colour for its extension, if any."""
    code = EXTENSION_COLORS.get(posixpath.splitext(path)[1])
    return f"{code}{path}{RESET}" if code else path
