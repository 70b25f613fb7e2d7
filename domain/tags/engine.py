"""Recursive custom-tag resolution over a node tree."""

from collections.abc import Callable

from domain.nodes.model import Node, NodeKind

# Receives a node carrying the matched tag and grafts replacement content into it.
TagResolver = Callable[[Node], None]


def resolve_tag(node: Node, tag: str, resolver: TagResolver) -> None:
    """
    Find every node tagged `tag` and let `resolver` replace it in place.

    Traversal is depth-first pre-order, in document order. A matched node is
    handed to the resolver and not descended into, so content the resolver
    substitutes is not re-scanned in the same pass. Only mapping values are
    visited; keys are never resolution targets.

    Nodes shared through YAML aliases are walked once, so recursive anchors
    terminate and a shared match is resolved a single time.

    The first exception raised by the resolver aborts the traversal and
    propagates unchanged. Nodes resolved before the failure keep their
    replacement content.
    """
    _walk(node, tag, resolver, set())


def _walk(node: Node, tag: str, resolver: TagResolver, visited: set[int]) -> None:
    if id(node) in visited:
        return
    visited.add(id(node))

    if node.tag == tag:
        resolver(node)
        return

    if node.kind is NodeKind.SEQUENCE:
        for child in node.children:
            _walk(child, tag, resolver, visited)
    elif node.kind is NodeKind.MAPPING:
        # values sit at the odd indices
        for i in range(1, len(node.children), 2):
            _walk(node.children[i], tag, resolver, visited)
