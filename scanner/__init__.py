"""Scanner module for import extraction, resolution and graph building."""

from .languages import detect_language
from .parser import parse_javascript, parse_python
from .resolver import resolve_local
from .builder import build_graph
from .discovery import discover_entries

__all__ = [
    "detect_language",
    "parse_javascript",
    "parse_python",
    "resolve_local",
    "build_graph",
    "discover_entries",
]
