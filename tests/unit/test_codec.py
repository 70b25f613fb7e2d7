import pytest
import yaml

from domain.nodes import BOOL_TAG, INT_TAG, MAP_TAG, NULL_TAG, SEQ_TAG, STR_TAG, Node, NodeKind
from infrastructure.yaml import decode, load_fragment, parse


def test_parse_preserves_mapping_order_and_core_tags() -> None:
    node = parse("b: 1\na: true\nc: text\nd:\n")

    assert node.kind is NodeKind.MAPPING
    assert node.tag == MAP_TAG
    assert [(k.value, v.tag) for k, v in node.pairs()] == [
        ("b", INT_TAG),
        ("a", BOOL_TAG),
        ("c", STR_TAG),
        ("d", NULL_TAG),
    ]
    assert node.get("d").is_null


def test_parse_keeps_custom_tags_unconstructed() -> None:
    node = parse(b"conf: !include other.yaml\nitems: [1, 2]\n")

    assert node.get("conf") == Node.scalar("other.yaml", tag="!include")
    assert node.get("items").tag == SEQ_TAG


def test_parse_keeps_duplicate_keys() -> None:
    node = parse("a: 1\na: 2\n")

    assert [k.value for k, _ in node.pairs()] == ["a", "a"]


def test_parse_aliases_share_one_node() -> None:
    node = parse("base: &b {x: 1}\ncopy: *b\n")

    assert node.get("base") is node.get("copy")


def test_parse_empty_document_is_null() -> None:
    assert parse("").is_null


def test_parse_error_is_yaml_error() -> None:
    with pytest.raises(yaml.YAMLError):
        parse("a: [1, 2\n")


def test_decode_builds_python_values() -> None:
    node = parse("name: demo\nport: 8080\ntls: yes\nhosts: [a, b]\nnothing:\n")

    assert decode(node) == {"name": "demo", "port": 8080, "tls": True, "hosts": ["a", "b"], "nothing": None}


def test_decode_hand_built_tree() -> None:
    node = Node.mapping([("flag", Node.scalar("false", tag=BOOL_TAG)), ("items", Node.sequence([Node.scalar("1")]))])

    assert decode(node) == {"flag": False, "items": ["1"]}


def test_decode_rejects_unresolved_custom_tag() -> None:
    node = parse("conf: !include other.yaml\n")

    with pytest.raises(yaml.constructor.ConstructorError):
        decode(node)


def test_load_fragment_reads_file(tmp_path) -> None:
    path = tmp_path / "fragment.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    node = load_fragment(path)

    assert node.is_sequence
    assert [c.value for c in node.children] == ["1", "2"]


def test_load_fragment_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_fragment(tmp_path / "missing.yaml")
