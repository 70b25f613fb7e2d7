"""YAML codec: text <-> Node tree <-> Python values (PyYAML)."""

from infrastructure.yaml.codec import decode, load_fragment, parse

__all__ = [
    "parse",
    "decode",
    "load_fragment",
]
