import logging

from domain.nodes.model import Node

from .engine import TagResolver, resolve_tag

logger = logging.getLogger(__name__)


class TagRegistry:
    """Ordered tag -> resolver table; each tag is resolved in its own full-tree pass."""

    def __init__(self) -> None:
        self._resolvers: dict[str, TagResolver] = {}

    def register(self, tag: str, resolver: TagResolver, *, override: bool = False) -> None:
        """Register a resolver for `tag`.

        Passes run in registration order; replacing a resolver with override=True keeps its slot.
        """
        if not tag:
            raise RuntimeError("Tag name must be a non-empty string")
        if (tag in self._resolvers) and not override:
            existing = self._resolvers[tag]
            raise RuntimeError(
                f"Resolver already registered for tag={tag}: {getattr(existing, '__name__', existing)!r}. "
                f"Use override=True to replace."
            )
        self._resolvers[tag] = resolver
        logger.debug("Registered resolver for tag=%s", tag)

    def get(self, tag: str) -> TagResolver | None:
        """Return the registered resolver (or None if not registered)."""
        return self._resolvers.get(tag)

    @property
    def tags(self) -> list[str]:
        return list(self._resolvers)

    def resolve_all(self, root: Node) -> None:
        """Run one `resolve_tag` pass per registered tag, in registration order."""
        for tag, resolver in self._resolvers.items():
            logger.debug("Resolving tag pass: %s", tag)
            resolve_tag(root, tag, resolver)

    def __contains__(self, tag: object) -> bool:
        return tag in self._resolvers

    def __len__(self) -> int:
        return len(self._resolvers)
