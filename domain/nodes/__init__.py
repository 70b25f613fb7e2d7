"""
YAML node model and shape normalization.

All functions in this package are pure (no file I/O).
"""

from domain.nodes.model import (
    BOOL_TAG,
    FLOAT_TAG,
    INT_TAG,
    MAP_TAG,
    NULL_TAG,
    SEQ_TAG,
    STR_TAG,
    Node,
    NodeKind,
)
from domain.nodes.shapes import (
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

__all__ = [
    # Model
    "Node",
    "NodeKind",
    # Core-schema tags
    "STR_TAG",
    "NULL_TAG",
    "BOOL_TAG",
    "INT_TAG",
    "FLOAT_TAG",
    "SEQ_TAG",
    "MAP_TAG",
    # Shape algebra
    "scalar_to_map",
    "scalar_to_map_val",
    "scalar_to_list",
    "list_to_map_val",
    "ensure_list",
    "ensure_flat_list",
    "ensure_map_map",
    "map_key_into_value_map",
    "map_split_key_val",
    "map_to_slice_map",
    "merge_slice_map",
    "is_scalar_map",
    "map_keys",
    "parse_bool_node",
]
