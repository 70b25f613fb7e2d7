"""
Configuration management: models and loading.

Handles:
- LoaderConfig: include tag names and which include passes run
- Loading it from YAML

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_loader_config
from infrastructure.config.models import LoaderConfig

__all__ = [
    "LoaderConfig",
    "load_loader_config",
]
