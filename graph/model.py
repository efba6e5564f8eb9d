"""Graph data model for storing module dependency relationships."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Set


LOCAL = "local"
EXTERNAL = "external"
BUILTIN = "builtin"


@dataclass(frozen=True)
class SourceFile:
    """A scanned source file, identified by its root-relative path."""

    path: str
    language: str
    dep_count: int
    abs_path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "language": self.language, "depCount": self.dep_count}


@dataclass(frozen=True)
class DependencyEdge:
    """A directed import edge from *source* to *target*."""

    source: str
    target: str
    specifier: str
    kind: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "specifier": self.specifier,
            "type": self.kind,
        }


@dataclass(frozen=True)
class UnresolvedImport:
    """A local-looking specifier that did not map to any file."""

    source: str
    specifier: str

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "specifier": self.specifier}


class DependencyGraph:
    """
    A directed graph of module dependencies.

    Nodes are the files that were actually scanned, in the order they were
    scanned. Edges are kept in discovery order and are never deduplicated, so
    two specifiers resolving to the same target give two edges. An edge may
    point at a path that never became a node when traversal was cut short by
    a depth limit.
    """

    def __init__(self):
        self._nodes: Dict[str, SourceFile] = {}
        self._edges: List[DependencyEdge] = []
        self._externals: Set[str] = set()
        self._builtins: Set[str] = set()
        self._unresolved: List[UnresolvedImport] = []

    @property
    def nodes(self) -> List[SourceFile]:
        """Return scanned files in first-scanned order."""
        return list(self._nodes.values())

    @property
    def edges(self) -> List[DependencyEdge]:
        """Return all edges in discovery order."""
        return list(self._edges)

    @property
    def externals(self) -> List[str]:
        """Return external package names, sorted."""
        return sorted(self._externals)

    @property
    def builtins(self) -> List[str]:
        """Return builtin module names, sorted."""
        return sorted(self._builtins)

    @property
    def unresolved(self) -> List[UnresolvedImport]:
        """Return unresolved local imports in discovery order."""
        return list(self._unresolved)

    def add_node(self, node: SourceFile) -> None:
        """Add a scanned file. A path already present is left untouched."""
        self._nodes.setdefault(node.path, node)

    def add_edge(self, source: str, target: str, specifier: str, kind: str = LOCAL) -> None:
        """Append a directed edge from source to target."""
        self._edges.append(DependencyEdge(source, target, specifier, kind))

    def add_external(self, name: str) -> None:
        self._externals.add(name)

    def add_builtin(self, name: str) -> None:
        self._builtins.add(name)

    def add_unresolved(self, source: str, specifier: str) -> None:
        """
        Record an unresolved local import.

        Args:
            source: Root-relative path of the importing file.
            specifier: The raw specifier that could not be resolved.
        """
        self._unresolved.append(UnresolvedImport(source, specifier))

    def get_roots(self) -> List[str]:
        """
        Get scanned files that no local edge points to.

        Falls back to the first scanned file when every node is imported by
        another one (a graph made only of cycles).
        """
        targets = {e.target for e in self._edges if e.kind == LOCAL}
        roots = [path for path in self._nodes if path not in targets]
        if not roots and self._nodes:
            roots.append(next(iter(self._nodes)))
        return roots

    def iter_local_edges(self) -> Iterator[DependencyEdge]:
        """Iterate over local edges only."""
        for edge in self._edges:
            if edge.kind == LOCAL:
                yield edge

    def to_dict(self) -> Dict[str, Any]:
        """Return the graph as plain data, in the shape JSON consumers expect."""
        return {
            "nodes": [n.to_dict() for n in self._nodes.values()],
            "edges": [e.to_dict() for e in self._edges],
            "externals": self.externals,
            "builtins": self.builtins,
            "unresolved": [u.to_dict() for u in self._unresolved],
        }

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, path: str) -> bool:
        """Check if a root-relative path was scanned."""
        return path in self._nodes

    def __repr__(self) -> str:
        return (
            f"DependencyGraph(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"externals={len(self._externals)}, builtins={len(self._builtins)}, "
            f"unresolved={len(self._unresolved)})"
        )
