"""
YAML codec built on PyYAML's composer and SafeLoader constructor.

- parse(): YAML text -> Node tree (order, duplicate keys, null and custom tags preserved)
- decode(): Node tree -> plain Python values (dict / list / scalars)
- load_fragment(): file -> Node tree, through a FileSystem
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from domain.nodes.model import MAP_TAG, SEQ_TAG, STR_TAG, Node, NodeKind
from infrastructure.io.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

_CORE_PREFIX = "tag:yaml.org,2002:"
_SHORT_PREFIX = "!!"

_DEFAULT_TAG_BY_KIND = {
    NodeKind.SCALAR: STR_TAG,
    NodeKind.SEQUENCE: SEQ_TAG,
    NodeKind.MAPPING: MAP_TAG,
}


def _short_tag(tag: str | None) -> str:
    if not tag:
        return ""
    if tag.startswith(_CORE_PREFIX):
        return _SHORT_PREFIX + tag[len(_CORE_PREFIX) :]
    return tag


def _long_tag(tag: str) -> str:
    if tag.startswith(_SHORT_PREFIX):
        return _CORE_PREFIX + tag[len(_SHORT_PREFIX) :]
    return tag


def _from_yaml_node(yn: yaml.Node, memo: dict[int, Node]) -> Node:
    # Aliases are the same PyYAML object; map them onto the same Node.
    cached = memo.get(id(yn))
    if cached is not None:
        return cached

    tag = _short_tag(yn.tag)
    if isinstance(yn, yaml.ScalarNode):
        node = Node(kind=NodeKind.SCALAR, tag=tag, value=yn.value)
        memo[id(yn)] = node
        return node

    if isinstance(yn, yaml.SequenceNode):
        node = Node(kind=NodeKind.SEQUENCE, tag=tag)
        memo[id(yn)] = node
        node.children = [_from_yaml_node(item, memo) for item in yn.value]
        return node

    if isinstance(yn, yaml.MappingNode):
        node = Node(kind=NodeKind.MAPPING, tag=tag)
        memo[id(yn)] = node
        children: list[Node] = []
        for key, value in yn.value:
            children.append(_from_yaml_node(key, memo))
            children.append(_from_yaml_node(value, memo))
        node.children = children
        return node

    raise TypeError(f"Unsupported YAML node type: {type(yn).__name__}")


def _to_yaml_node(node: Node, memo: dict[int, yaml.Node]) -> yaml.Node:
    cached = memo.get(id(node))
    if cached is not None:
        return cached

    tag = _long_tag(node.tag or _DEFAULT_TAG_BY_KIND[node.kind])
    if node.kind is NodeKind.SCALAR:
        yn: yaml.Node = yaml.ScalarNode(tag, node.value)
        memo[id(node)] = yn
        return yn

    if node.kind is NodeKind.SEQUENCE:
        yn = yaml.SequenceNode(tag, [])
        memo[id(node)] = yn
        yn.value.extend(_to_yaml_node(child, memo) for child in node.children)
        return yn

    yn = yaml.MappingNode(tag, [])
    memo[id(node)] = yn
    yn.value.extend(
        (_to_yaml_node(key, memo), _to_yaml_node(value, memo)) for key, value in node.pairs()
    )
    return yn


def parse(data: bytes | str) -> Node:
    """
    Parse a single YAML document into a Node tree.

    Custom tags are kept on the nodes untouched (they are not constructed).
    An empty document yields a null scalar.

    Raises:
        yaml.YAMLError: If the text is not well-formed YAML or holds several documents
    """
    root = yaml.compose(data, Loader=yaml.SafeLoader)
    if root is None:
        return Node.null()
    return _from_yaml_node(root, {})


def decode(node: Node) -> Any:
    """
    Construct plain Python values from a Node tree with PyYAML's SafeLoader rules.

    Raises:
        yaml.constructor.ConstructorError: If a node still carries an unresolved custom tag
    """
    loader = yaml.SafeLoader("")
    try:
        return loader.construct_document(_to_yaml_node(node, {}))
    finally:
        loader.dispose()


def load_fragment(path: str | Path, fs: FileSystem | None = None) -> Node:
    """
    Read a YAML file and parse it into a standalone Node tree.

    Errors from the filesystem (FileNotFoundError, OSError) and from the
    parser (yaml.YAMLError) propagate unchanged.
    """
    fs = fs or LocalFileSystem()
    logger.debug("Loading YAML fragment: %s", path)
    return parse(fs.read_file(path))
