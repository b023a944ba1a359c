"""Domain models for forgelink."""

from forgelink.core.models.forge import ForgeEntry, ForgeKind, ForgeRule
from forgelink.core.models.link import LinkRequest, Selection

__all__ = [
    "ForgeKind",
    "ForgeEntry",
    "ForgeRule",
    "Selection",
    "LinkRequest",
]
