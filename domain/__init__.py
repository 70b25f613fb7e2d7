"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- nodes: the YAML node model and the shape-normalization algebra
- tags: the custom-tag resolution engine and registry
- schemas: Pydantic records for the example site document
"""

from domain.nodes import Node, NodeKind
from domain.tags import TagRegistry, resolve_tag

__all__ = [
    "Node",
    "NodeKind",
    "TagRegistry",
    "resolve_tag",
]
