"""Document loading: parse a YAML file and run the configured tag passes."""

import logging
from pathlib import Path

from domain.nodes.model import Node
from domain.tags import TagRegistry
from infrastructure.config import LoaderConfig
from infrastructure.io import FileSystem, LocalFileSystem
from infrastructure.observability import reset_log_context, set_log_context
from infrastructure.yaml import load_fragment

from .includes import default_registry

logger = logging.getLogger(__name__)


def load_document(
    path: str | Path,
    cfg: LoaderConfig | None = None,
    fs: FileSystem | None = None,
    *,
    registry: TagRegistry | None = None,
) -> Node:
    """
    Load a YAML document and resolve its include tags.

    Args:
        path: Document to load
        cfg: Tag names and enabled passes (defaults to LoaderConfig())
        fs: Filesystem to read through (defaults to the local disk)
        registry: Use this registry instead of the default include registry
            (e.g. one with extra custom tags registered)

    Returns:
        The root Node with every enabled tag pass applied

    Raises:
        FileNotFoundError / OSError: If the document or an included file cannot be read
        yaml.YAMLError: If the document or an included file is not valid YAML
    """
    fs = fs or LocalFileSystem()
    cfg = cfg or LoaderConfig()
    registry = registry if registry is not None else default_registry(fs=fs, cfg=cfg)

    token = set_log_context(document=path)
    try:
        root = load_fragment(path, fs=fs)
        logger.debug("Resolving tags %s", registry.tags)
        registry.resolve_all(root)
    finally:
        reset_log_context(token)
    return root
