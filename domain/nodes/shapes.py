"""
Shape-normalization algebra over YAML nodes.

Each function converts one node shape into another and returns the result,
or returns its input unchanged when the node does not have the expected
shape. Inputs are never mutated; results may share child nodes with the
input but always own fresh children lists.

Typical use is normalizing terse, human-written YAML (bare scalars,
singleton maps, omitted values) into one canonical shape before binding:

    >>> node = scalar_to_map_val(Node.scalar("~/x"), "path")
    >>> map_keys(node)
    ['path']
"""

from domain.nodes.model import BOOL_TAG, MAP_TAG, SEQ_TAG, Node, NodeKind

# Plain-text booleans of the YAML 1.2 core schema
_CORE_BOOLS = {
    "true": True,
    "True": True,
    "TRUE": True,
    "false": False,
    "False": False,
    "FALSE": False,
}

# Values accepted once a scalar is explicitly tagged !!bool (YAML 1.1 vocabulary, lower-cased)
_TAGGED_BOOLS = {
    "true": True,
    "false": False,
    "yes": True,
    "no": False,
    "on": True,
    "off": False,
}


def scalar_to_map(node: Node) -> Node:
    """Scalar `s` -> mapping `{s: null}`."""
    if not node.is_scalar:
        return node
    return Node.mapping([(node, Node.null())])


def scalar_to_map_val(node: Node, key: str) -> Node:
    """Scalar `s` -> mapping `{key: s}`."""
    if not node.is_scalar:
        return node
    return Node.mapping([(key, node)])


def scalar_to_list(node: Node) -> Node:
    """Wrap any node as a single-element sequence."""
    return Node.sequence([node])


def list_to_map_val(node: Node, key: str) -> Node:
    """Sequence `l` -> mapping `{key: l}`."""
    if not node.is_sequence:
        return node
    return Node.mapping([(key, node)])


def ensure_list(node: Node) -> Node:
    """Sequences pass through; anything else becomes a single-element sequence."""
    if node.is_sequence:
        return node
    return Node.sequence([node])


def _flatten_into(out: list[Node], seq: Node, path: set[int]) -> None:
    # a sequence already on the path is a recursive alias; it is skipped
    path.add(id(seq))
    for item in seq.children:
        if not item.is_sequence:
            out.append(item)
        elif id(item) not in path:
            _flatten_into(out, item, path)
    path.discard(id(seq))


def ensure_flat_list(node: Node) -> Node:
    """Inline nested sequences (at any depth) into one flat sequence; recursive aliases are dropped."""
    if not node.is_sequence:
        return node
    flat: list[Node] = []
    _flatten_into(flat, node, set())
    return Node.sequence(flat, tag=node.tag or SEQ_TAG)


def ensure_map_map(node: Node) -> Node:
    """
    Make a value addressable as a mapping.

    - mapping: unchanged
    - null scalar: empty mapping
    - any other scalar `s`: `{s: {}}`
    - sequences pass through untouched
    """
    if node.is_mapping or node.is_sequence:
        return node
    if node.is_null:
        return Node.mapping()
    return Node.mapping([(node, Node.mapping())])


def map_key_into_value_map(node: Node, key_key: str) -> Node:
    """
    Promote the sole key of a singleton mapping into its nested mapping.

    `{k: {a: 1}}` -> `{a: 1, key_key: k}`
    """
    if not node.is_mapping or len(node.children) != 2:
        return node
    key, inner = node.children
    if not inner.is_mapping:
        return node
    children = [*inner.children, Node.scalar(key_key), key]
    return Node(kind=NodeKind.MAPPING, tag=inner.tag or MAP_TAG, children=children)


def map_split_key_val(node: Node, key_key: str, val_key: str) -> Node:
    """`{k: v}` -> `{key_key: k, val_key: v}` for a singleton mapping."""
    if not node.is_mapping or len(node.children) != 2:
        return node
    key, value = node.children
    return Node.mapping([(key_key, key), (val_key, value)])


def map_to_slice_map(node: Node) -> Node:
    """`{a: 1, b: 2}` -> `[{a: 1}, {b: 2}]`, preserving order."""
    if not node.is_mapping:
        return node
    return Node.sequence(Node.mapping([(key, value)]) for key, value in node.pairs())


def merge_slice_map(node: Node) -> Node:
    """Inverse of `map_to_slice_map`: fold a sequence of mappings into one mapping, in order."""
    if not node.is_sequence or not all(item.is_mapping for item in node.children):
        return node
    children: list[Node] = []
    for item in node.children:
        children.extend(item.children)
    return Node(kind=NodeKind.MAPPING, tag=MAP_TAG, children=children)


def is_scalar_map(node: Node) -> bool:
    """True iff `node` is a mapping whose keys and values are all scalars."""
    if not node.is_mapping:
        return False
    return all(child.is_scalar for child in node.children)


def map_keys(node: Node) -> list[str]:
    """Ordered scalar key strings of a mapping (empty for other kinds)."""
    return [key.value for key, _ in node.pairs() if key.is_scalar]


def parse_bool_node(node: Node) -> tuple[bool, bool]:
    """
    Interpret a scalar as a YAML boolean.

    Returns:
        (value, True) when the node denotes a boolean, (False, False) otherwise.
        Never raises on non-boolean input.
    """
    if not node.is_scalar:
        return False, False
    if node.tag == BOOL_TAG:
        parsed = _TAGGED_BOOLS.get(node.value.strip().lower())
    else:
        parsed = _CORE_BOOLS.get(node.value)
    if parsed is None:
        return False, False
    return parsed, True
