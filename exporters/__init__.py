"""Exporters for converting graph to various output formats."""

from .tree_exporter import to_tree
from .dot_exporter import to_dot
from .json_exporter import to_json

__all__ = ["to_tree", "to_dot", "to_json"]
