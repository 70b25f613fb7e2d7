"""Generic YAML node tree (scalar / sequence / mapping)."""

from collections.abc import Iterable, Iterator
from enum import Enum

from pydantic import BaseModel, Field, model_validator

STR_TAG = "!!str"
NULL_TAG = "!!null"
BOOL_TAG = "!!bool"
INT_TAG = "!!int"
FLOAT_TAG = "!!float"
SEQ_TAG = "!!seq"
MAP_TAG = "!!map"


class NodeKind(str, Enum):
    """Closed set of node variants."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class Node(BaseModel):
    """
    One element of a YAML document tree.

    - Scalars carry their raw text in `value` and have no children.
    - Sequences carry their items in `children`.
    - Mappings carry alternating key/value nodes in `children`
      (index 2i is a key, 2i+1 its value). Order is preserved and
      duplicate keys are kept.

    Nodes are mutable and have no parent pointer. A node is replaced in
    place with `graft()`, so every reference held into the tree sees the
    new content.
    """

    kind: NodeKind
    tag: str = ""
    value: str = ""
    children: list["Node"] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate(self) -> "Node":
        if self.kind is NodeKind.SCALAR and self.children:
            raise ValueError("scalar node cannot have children")
        if self.kind is not NodeKind.SCALAR and self.value:
            raise ValueError(f"{self.kind.value} node cannot carry a scalar value")
        if self.kind is NodeKind.MAPPING and len(self.children) % 2:
            raise ValueError(f"mapping node needs an even number of children, got {len(self.children)}")
        return self

    # ---- constructors ----

    @classmethod
    def scalar(cls, value: object, tag: str = STR_TAG) -> "Node":
        return cls(kind=NodeKind.SCALAR, tag=tag, value=str(value))

    @classmethod
    def null(cls) -> "Node":
        return cls(kind=NodeKind.SCALAR, tag=NULL_TAG, value="")

    @classmethod
    def sequence(cls, items: Iterable["Node"] = (), tag: str = SEQ_TAG) -> "Node":
        return cls(kind=NodeKind.SEQUENCE, tag=tag, children=list(items))

    @classmethod
    def mapping(cls, pairs: Iterable[tuple["Node | str", "Node"]] = (), tag: str = MAP_TAG) -> "Node":
        """Build a mapping from (key, value) pairs; plain string keys become `!!str` scalars."""
        children: list[Node] = []
        for key, value in pairs:
            children.append(key if isinstance(key, Node) else cls.scalar(key))
            children.append(value)
        return cls(kind=NodeKind.MAPPING, tag=tag, children=children)

    # ---- predicates ----

    @property
    def is_scalar(self) -> bool:
        return self.kind is NodeKind.SCALAR

    @property
    def is_sequence(self) -> bool:
        return self.kind is NodeKind.SEQUENCE

    @property
    def is_mapping(self) -> bool:
        return self.kind is NodeKind.MAPPING

    @property
    def is_null(self) -> bool:
        return self.kind is NodeKind.SCALAR and self.tag == NULL_TAG

    # ---- navigation / mutation ----

    def pairs(self) -> Iterator[tuple["Node", "Node"]]:
        """Yield (key, value) pairs of a mapping in document order; nothing for other kinds."""
        if self.kind is not NodeKind.MAPPING:
            return
        for i in range(0, len(self.children), 2):
            yield self.children[i], self.children[i + 1]

    def get(self, key: str) -> "Node | None":
        """Value of the first pair whose scalar key equals `key` (None if absent or not a mapping)."""
        for k, v in self.pairs():
            if k.is_scalar and k.value == key:
                return v
        return None

    def graft(self, other: "Node") -> None:
        """Overwrite this node with the content of `other` (kind, tag, value, children)."""
        self.kind = other.kind
        self.tag = other.tag
        self.value = other.value
        self.children = list(other.children)

    def clone(self) -> "Node":
        """Deep copy of the subtree rooted here."""
        return self.model_copy(deep=True)
