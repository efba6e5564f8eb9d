"""Dependency graph data model."""
