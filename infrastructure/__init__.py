"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Filesystem access (read file, list directory)
- YAML codec (PyYAML composer / constructor)
- Configuration loading (YAML)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import LoaderConfig, load_loader_config
from infrastructure.io import FileSystem, LocalFileSystem
from infrastructure.yaml import decode, load_fragment, parse

__all__ = [
    # YAML codec (most commonly used)
    "parse",
    "decode",
    "load_fragment",
    # Filesystem
    "FileSystem",
    "LocalFileSystem",
    # Configuration
    "LoaderConfig",
    "load_loader_config",
]
