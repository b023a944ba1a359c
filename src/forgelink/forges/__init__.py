"""Forge registry and link resolution."""

from forgelink.forges.registry import (
    DEFAULT_FORGES,
    build_registry,
    get_registry,
    rebuild_registry,
)
from forgelink.forges.resolver import LinkResolver, resolve_link

__all__ = [
    "DEFAULT_FORGES",
    "build_registry",
    "get_registry",
    "rebuild_registry",
    "LinkResolver",
    "resolve_link",
]
