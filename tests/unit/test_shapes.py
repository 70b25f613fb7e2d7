import pytest

from domain.nodes import (
    BOOL_TAG,
    INT_TAG,
    Node,
    ensure_flat_list,
    ensure_list,
    ensure_map_map,
    is_scalar_map,
    list_to_map_val,
    map_key_into_value_map,
    map_keys,
    map_split_key_val,
    map_to_slice_map,
    merge_slice_map,
    parse_bool_node,
    scalar_to_list,
    scalar_to_map,
    scalar_to_map_val,
)
from infrastructure.yaml import parse


def _s(value: str) -> Node:
    return Node.scalar(value)


def _pairs(node: Node) -> list[tuple[str, str]]:
    return [(k.value, v.value) for k, v in node.pairs()]


SAMPLE_NODES = [
    _s("x"),
    Node.null(),
    Node.mapping([("a", _s("1"))]),
    Node.mapping(),
]


def test_scalar_to_map() -> None:
    node = scalar_to_map(_s("key"))

    assert node.is_mapping
    key, value = node.children
    assert key.value == "key"
    assert value.is_null


def test_scalar_to_map_val_wraps_under_key() -> None:
    node = scalar_to_map_val(_s("~/x"), "path")

    assert _pairs(node) == [("path", "~/x")]


def test_scalar_to_list_wraps_anything() -> None:
    scalar = _s("x")
    seq = Node.sequence([_s("y")])

    assert scalar_to_list(scalar).children == [scalar]
    assert scalar_to_list(seq).children[0] is seq


def test_list_to_map_val() -> None:
    seq = Node.sequence([_s("a"), _s("b")])

    node = list_to_map_val(seq, "items")

    assert map_keys(node) == ["items"]
    assert node.get("items") is seq


@pytest.mark.parametrize("node", SAMPLE_NODES)
def test_ensure_list_wraps_non_sequences(node: Node) -> None:
    result = ensure_list(node)

    assert result.is_sequence
    assert len(result.children) == 1
    assert result.children[0] is node


def test_ensure_list_keeps_sequences() -> None:
    seq = Node.sequence([_s("a")])

    assert ensure_list(seq) is seq


def test_ensure_flat_list_inlines_nested_sequences() -> None:
    seq = Node.sequence(
        [
            _s("a"),
            Node.sequence([_s("b"), Node.sequence([_s("c"), Node.sequence([])])]),
            Node.mapping([("d", _s("1"))]),
        ]
    )

    flat = ensure_flat_list(seq)

    assert [c.value for c in flat.children[:3]] == ["a", "b", "c"]
    assert flat.children[3].is_mapping
    assert len(flat.children) == 4
    # input untouched
    assert len(seq.children) == 3


def test_ensure_map_map() -> None:
    mapping = Node.mapping([("a", _s("1"))])
    seq = Node.sequence([_s("a")])

    assert ensure_map_map(mapping) is mapping
    assert ensure_map_map(seq) is seq
    assert ensure_map_map(Node.null()) == Node.mapping()

    wrapped = ensure_map_map(_s("name"))
    assert map_keys(wrapped) == ["name"]
    assert wrapped.get("name") == Node.mapping()


def test_map_key_into_value_map_promotes_key() -> None:
    node = Node.mapping([("~/x", Node.mapping([("key2", _s("val2"))]))])

    result = map_key_into_value_map(node, "path")

    assert _pairs(result) == [("key2", "val2"), ("path", "~/x")]


def test_map_key_into_value_map_leaves_inner_mapping_untouched() -> None:
    inner = Node.mapping([("key2", _s("val2"))])

    map_key_into_value_map(Node.mapping([("k", inner)]), "path")

    assert len(inner.children) == 2


@pytest.mark.parametrize(
    "node",
    [
        _s("x"),
        Node.mapping([("k", _s("scalar value"))]),
        Node.mapping([("a", Node.mapping()), ("b", Node.mapping())]),
    ],
)
def test_map_key_into_value_map_mismatch_is_identity(node: Node) -> None:
    assert map_key_into_value_map(node, "path") is node


def test_map_split_key_val() -> None:
    node = Node.mapping([("alice", _s("admin"))])

    result = map_split_key_val(node, "user", "role")

    assert _pairs(result) == [("user", "alice"), ("role", "admin")]


def test_map_split_key_val_mismatch_is_identity() -> None:
    node = Node.mapping([("a", _s("1")), ("b", _s("2"))])

    assert map_split_key_val(node, "k", "v") is node


def test_map_to_slice_map_preserves_order_and_duplicates() -> None:
    node = Node.mapping([("b", _s("1")), ("a", _s("2")), ("b", _s("3"))])

    result = map_to_slice_map(node)

    assert result.is_sequence
    assert [_pairs(item) for item in result.children] == [[("b", "1")], [("a", "2")], [("b", "3")]]


def test_map_to_slice_map_round_trip() -> None:
    node = Node.mapping([("z", _s("1")), ("y", Node.sequence([_s("2")])), ("x", Node.null())])

    rebuilt = merge_slice_map(map_to_slice_map(node))

    assert rebuilt == node


def test_merge_slice_map_requires_mappings() -> None:
    seq = Node.sequence([Node.mapping([("a", _s("1"))]), _s("b")])

    assert merge_slice_map(seq) is seq


def test_is_scalar_map() -> None:
    assert is_scalar_map(Node.mapping([("a", _s("1")), ("b", _s("2"))]))
    assert not is_scalar_map(Node.mapping([("a", Node.mapping([("c", _s("1"))]))]))
    assert not is_scalar_map(Node.sequence([_s("a")]))


def test_map_keys() -> None:
    node = Node.mapping([("b", _s("1")), ("a", _s("2"))])

    assert map_keys(node) == ["b", "a"]
    assert map_keys(_s("x")) == []
    assert map_keys(Node.sequence([_s("a")])) == []


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        (_s("true"), (True, True)),
        (_s("False"), (False, True)),
        (Node.scalar("yes", tag=BOOL_TAG), (True, True)),
        (Node.scalar("OFF", tag=BOOL_TAG), (False, True)),
        (_s("hello"), (False, False)),
        (_s("yes"), (False, False)),
        (Node.scalar("1", tag=INT_TAG), (False, False)),
        (Node.mapping(), (False, False)),
    ],
)
def test_parse_bool_node(node: Node, expected: tuple[bool, bool]) -> None:
    assert parse_bool_node(node) == expected


@pytest.mark.parametrize(
    "fn",
    [
        lambda n: scalar_to_map(n),
        lambda n: scalar_to_map_val(n, "k"),
        lambda n: map_split_key_val(n, "k", "v"),
        lambda n: map_key_into_value_map(n, "k"),
    ],
)
def test_shape_functions_do_not_mutate_input(fn) -> None:
    node = Node.mapping([("k", Node.mapping([("a", _s("1"))]))])
    before = node.clone()

    fn(node)
    fn(_s("scalar"))

    assert node == before


def test_ensure_flat_list_drops_recursive_alias() -> None:
    node = parse("&x [1, *x, 2]\n")

    flat = ensure_flat_list(node)

    assert [c.value for c in flat.children] == ["1", "2"]


def test_ensure_flat_list_inlines_repeated_alias_each_time() -> None:
    node = parse("- &a [1, 2]\n- *a\n")

    flat = ensure_flat_list(node)

    assert [c.value for c in flat.children] == ["1", "2", "1", "2"]
