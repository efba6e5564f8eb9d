"""Graph builder that orchestrates scanning and graph construction."""

import logging
import os
from collections import deque
from pathlib import Path
from typing import Deque, Iterable, Optional, Set, Tuple, Union

from graph.model import BUILTIN, EXTERNAL, LOCAL, DependencyGraph, SourceFile
from .languages import detect_language
from .parser import read_source
from .resolver import get_relative_path, resolve_local


logger = logging.getLogger(__name__)

EXTERNAL_LABEL = "[ext] {}"
BUILTIN_LABEL = "[builtin] {}"


def build_graph(
    entries: Iterable[Union[str, Path]],
    root: Union[str, Path] = ".",
    include_external: bool = False,
    include_builtin: bool = False,
    max_depth: Optional[int] = None,
) -> DependencyGraph:
    """
    Build a dependency graph by breadth-first traversal from entry files.

    Each file is scanned at most once. Local imports that resolve to a file
    always produce an edge; the target is queued for scanning only while the
    importing file sits above `max_depth`. Missing files and files with an
    unrecognised extension are skipped without error.

    Args:
        entries: Entry file paths, absolute or relative to root.
        root: Project root directory.
        include_external: If True, add edges for external packages.
        include_builtin: If True, add edges for builtin modules.
        max_depth: Maximum traversal depth from the entries. None is unbounded.

    Returns:
        DependencyGraph of every file reached.

    Raises:
        OSError: If an existing file cannot be read (e.g. permission denied).
    """
    graph = DependencyGraph()
    root = os.path.abspath(root)

    queue: Deque[Tuple[str, int]] = deque(
        (os.path.normpath(os.path.join(root, entry)), 0) for entry in entries
    )
    visited: Set[str] = set()

    while queue:
        file_path, depth = queue.popleft()
        rel_path = get_relative_path(file_path, root)

        if rel_path in visited:
            continue
        visited.add(rel_path)

        if not os.path.isfile(file_path):
            logger.debug("Skipping %s: not a file", rel_path)
            continue

        language = detect_language(file_path)
        if language is None:
            logger.debug("Skipping %s: unrecognised extension", rel_path)
            continue

        specifiers = language.scan(read_source(Path(file_path)))
        graph.add_node(SourceFile(
            path=rel_path,
            language=language.name,
            dep_count=len(specifiers),
            abs_path=file_path,
        ))
        logger.debug("Scanned %s (depth %d): %d specifier(s)", rel_path, depth, len(specifiers))

        for specifier in specifiers:
            kind = language.classify(specifier)

            if kind == LOCAL:
                resolved = resolve_local(specifier, file_path, root, language)
                if resolved is None:
                    logger.debug("Unresolved import %r in %s", specifier, rel_path)
                    graph.add_unresolved(rel_path, specifier)
                    continue
                graph.add_edge(rel_path, resolved, specifier, LOCAL)
                if (max_depth is None or depth < max_depth) and resolved not in visited:
                    queue.append((os.path.normpath(os.path.join(root, resolved)), depth + 1))

            elif kind == EXTERNAL:
                graph.add_external(specifier)
                if include_external:
                    graph.add_edge(rel_path, EXTERNAL_LABEL.format(specifier), specifier, EXTERNAL)

            elif kind == BUILTIN:
                graph.add_builtin(specifier)
                if include_builtin:
                    graph.add_edge(rel_path, BUILTIN_LABEL.format(specifier), specifier, BUILTIN)

    logger.info(
        "Built graph: %d file(s), %d edge(s), %d unresolved",
        len(graph), len(graph.edges), len(graph.unresolved),
    )
    return graph
