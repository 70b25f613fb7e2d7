"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure:
include tags are resolved over parsed documents, and normalized
node trees are bound to typed records.
"""

from application.binding import bind, bind_list
from application.includes import (
    default_registry,
    include_dir_named,
    include_file,
    resolve_dir_includes,
    resolve_includes,
)
from application.loading import load_document
from application.site import load_site, normalize_site

__all__ = [
    # Main workflows
    "load_document",
    "resolve_includes",
    "resolve_dir_includes",
    "default_registry",
    # Resolvers
    "include_file",
    "include_dir_named",
    # Binding
    "bind",
    "bind_list",
    # Example site document
    "normalize_site",
    "load_site",
]
