"""Bind normalized node trees to typed records."""

from typing import TypeVar

from pydantic import BaseModel

from domain.nodes.model import Node
from domain.nodes.shapes import ensure_list
from infrastructure.yaml import decode

ModelT = TypeVar("ModelT", bound=BaseModel)


def bind(node: Node, model: type[ModelT]) -> ModelT:
    """
    Decode `node` and validate it into `model`.

    Raises:
        ValueError: If the node is not a mapping, or the data does not validate
        yaml.constructor.ConstructorError: If an unresolved custom tag is left in the tree
    """
    if not node.is_mapping:
        raise ValueError(f"Expected a mapping node to bind {model.__name__}, got {node.kind.value}")
    return model.model_validate(decode(node))


def bind_list(node: Node, model: type[ModelT]) -> list[ModelT]:
    """Bind every item of a sequence node (a non-sequence is bound as a one-item list)."""
    items = ensure_list(node).children
    return [bind(item, model) for item in items]
