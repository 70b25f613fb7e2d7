"""
Normalization of the example site document before binding.

The YAML is allowed to be terse:
- `hosts` may be a single host or arbitrarily nested lists of hosts
- `services` is a name -> service mapping (typically `!include_dir_named`)
- a service may be a bare port number instead of a mapping
- `routes` may be a single route instead of a list
- `tls` accepts any YAML boolean spelling

normalize_site() rewrites all of that into the shape domain.schemas.Site expects.
"""

import logging
from pathlib import Path

from domain.nodes.model import BOOL_TAG, Node
from domain.nodes.shapes import (
    ensure_flat_list,
    ensure_list,
    map_key_into_value_map,
    map_to_slice_map,
    parse_bool_node,
    scalar_to_map_val,
)
from domain.schemas import Site
from infrastructure.config import LoaderConfig
from infrastructure.io import FileSystem

from .binding import bind
from .constants import (
    SERVICE_NAME_KEY,
    SERVICE_PORT_KEY,
    SERVICE_ROUTES_KEY,
    SERVICE_TLS_KEY,
    SITE_HOSTS_KEY,
    SITE_SERVICES_KEY,
)
from .loading import load_document

logger = logging.getLogger(__name__)


def _with_value(mapping: Node, key: str, value: Node) -> Node:
    """Copy of `mapping` with the value of `key` replaced (appended when absent)."""
    pairs = list(mapping.pairs())
    for i, (k, _) in enumerate(pairs):
        if k.is_scalar and k.value == key:
            pairs[i] = (k, value)
            break
    else:
        pairs.append((key, value))
    return Node.mapping(pairs, tag=mapping.tag)


def normalize_service(entry: Node) -> Node:
    """
    Normalize one `{name: service}` pair into a flat service mapping.

    `{api: 8080}` -> `{port: 8080, name: api}`
    `{api: {port: 8080, routes: /x, tls: yes}}` -> `{port: 8080, routes: [/x], tls: true, name: api}`
    """
    if not entry.is_mapping or len(entry.children) != 2:
        return entry
    key, value = entry.children
    value = scalar_to_map_val(value, SERVICE_PORT_KEY)
    service = map_key_into_value_map(Node.mapping([(key, value)]), SERVICE_NAME_KEY)

    routes = service.get(SERVICE_ROUTES_KEY)
    if routes is not None and not routes.is_null:
        service = _with_value(service, SERVICE_ROUTES_KEY, ensure_flat_list(ensure_list(routes)))

    tls = service.get(SERVICE_TLS_KEY)
    if tls is not None:
        flag, ok = parse_bool_node(tls)
        if not ok:
            raise ValueError(f"Service {key.value!r}: {SERVICE_TLS_KEY} must be a boolean, got {tls.value!r}")
        service = _with_value(service, SERVICE_TLS_KEY, Node.scalar("true" if flag else "false", tag=BOOL_TAG))

    return service


def normalize_site(root: Node) -> Node:
    """
    Return a normalized site document.

    The input tree is not mutated, but the result may be the input itself (non-mapping root)
    and shares every node it does not reshape with the input.
    """
    if not root.is_mapping:
        return root
    site = root

    hosts = site.get(SITE_HOSTS_KEY)
    if hosts is not None and not hosts.is_null:
        site = _with_value(site, SITE_HOSTS_KEY, ensure_flat_list(ensure_list(hosts)))

    services = site.get(SITE_SERVICES_KEY)
    if services is not None and services.is_mapping:
        entries = map_to_slice_map(services).children
        normalized = Node.sequence(normalize_service(entry) for entry in entries)
        logger.debug("Normalized %d service(s)", len(normalized.children))
        site = _with_value(site, SITE_SERVICES_KEY, normalized)

    return site


def load_site(path: str | Path, cfg: LoaderConfig | None = None, fs: FileSystem | None = None) -> Site:
    """Load, resolve includes, normalize and bind a site document."""
    root = load_document(path, cfg=cfg, fs=fs)
    return bind(normalize_site(root), Site)
