"""
File inclusion tags, resolved with the generic tag engine.

- `!include <path>`: the node is replaced by the parsed content of the file.
- `!include_dir_named <dir>`: the node is replaced by a mapping of
  file stem -> parsed file content, one pair per regular file in `dir`
  (non-recursive, sub-directories skipped, filesystem enumeration order).

Paths are used as written (relative paths resolve against the working
directory). Content spliced in by a pass is not scanned again by that pass.
Any read or parse error aborts the whole pass and propagates unchanged;
includes resolved before the error stay resolved.
"""

import logging
import os
from pathlib import PurePath

from domain.nodes.model import MAP_TAG, Node
from domain.tags import TagRegistry, resolve_tag
from infrastructure.config import LoaderConfig
from infrastructure.constants import INCLUDE_DIR_NAMED_TAG, INCLUDE_TAG
from infrastructure.io import FileSystem, LocalFileSystem
from infrastructure.yaml import load_fragment

logger = logging.getLogger(__name__)


def file_stem(name: str) -> str:
    """Base name without its last extension (`a.b.yaml` -> `a.b`, `README` -> `README`)."""
    return PurePath(name).stem


def include_file(node: Node, fs: FileSystem | None = None) -> None:
    """Resolver for `!include`: graft the fragment loaded from `node.value`."""
    logger.debug("Including file: %s", node.value)
    node.graft(load_fragment(node.value, fs=fs))


def include_dir_named(node: Node, fs: FileSystem | None = None) -> None:
    """Resolver for `!include_dir_named`: graft a `stem -> content` mapping of the directory's files."""
    fs = fs or LocalFileSystem()
    directory = node.value
    logger.debug("Including directory: %s", directory)

    pairs: list[tuple[str, Node]] = []
    # close the directory handle before any file is read
    entries = list(fs.list_dir(directory))
    for entry in entries:
        if entry.is_dir:
            continue
        fragment = load_fragment(os.path.join(directory, entry.name), fs=fs)
        pairs.append((file_stem(entry.name), fragment))

    logger.debug("Included %d file(s) from %s", len(pairs), directory)
    node.graft(Node.mapping(pairs, tag=MAP_TAG))


def resolve_includes(root: Node, fs: FileSystem | None = None, *, tag: str = INCLUDE_TAG) -> None:
    """Replace every `!include` node under `root` with the included file's content."""
    fs = fs or LocalFileSystem()
    resolve_tag(root, tag, lambda n: include_file(n, fs=fs))


def resolve_dir_includes(root: Node, fs: FileSystem | None = None, *, tag: str = INCLUDE_DIR_NAMED_TAG) -> None:
    """Replace every `!include_dir_named` node under `root` with a name -> content mapping."""
    fs = fs or LocalFileSystem()
    resolve_tag(root, tag, lambda n: include_dir_named(n, fs=fs))


def default_registry(fs: FileSystem | None = None, cfg: LoaderConfig | None = None) -> TagRegistry:
    """
    TagRegistry pre-populated with the include resolvers enabled in `cfg`.

    The single-file pass is registered first so it runs before the directory pass.
    Callers may register further custom tags on the returned registry.
    """
    fs = fs or LocalFileSystem()
    cfg = cfg or LoaderConfig()

    registry = TagRegistry()
    if cfg.resolve_includes:
        registry.register(cfg.include_tag, lambda n: include_file(n, fs=fs))
    if cfg.resolve_dir_includes:
        registry.register(cfg.include_dir_named_tag, lambda n: include_dir_named(n, fs=fs))
    return registry
