"""
Custom-tag resolution: a generic tree walker plus a registry of tag resolvers.

All functions in this package are pure; resolvers supplied by callers may do I/O.
"""

from domain.tags.engine import TagResolver, resolve_tag
from domain.tags.registry import TagRegistry

__all__ = [
    "TagResolver",
    "TagRegistry",
    "resolve_tag",
]
