"""Process-wide forge registry.

The registry is compiled from an ordered table of
``(host_domain, kind, protocol, *extra)`` rows. It is built lazily on first
use and then shared read-only; ``rebuild_registry`` swaps in a new table.
"""

import threading
from collections.abc import Iterable, Sequence
from typing import Any

import structlog

from forgelink.core.exceptions import DuplicateForgeError
from forgelink.core.models.forge import ForgeEntry, ForgeKind, ForgeRule
from forgelink.forges.templates import build_rule

logger = structlog.get_logger(__name__)

ForgeRow = Sequence[Any]

DEFAULT_FORGES: tuple[ForgeRow, ...] = (
    ("github.com", ForgeKind.GITHUB, "https"),
    ("gitlab.com", ForgeKind.GITLAB, "https"),
    ("salsa.debian.org", ForgeKind.GITLAB, "https"),
    ("gitlab.gnome.org", ForgeKind.GITLAB, "https"),
    ("invent.kde.org", ForgeKind.GITLAB, "https"),
    ("framagit.org", ForgeKind.GITLAB, "https"),
    ("codeberg.org", ForgeKind.GITEA, "https"),
    ("gitea.com", ForgeKind.GITEA, "https"),
    ("bitbucket.org", ForgeKind.BITBUCKET, "https"),
    ("pagure.io", ForgeKind.PAGURE, "https"),
    ("src.fedoraproject.org", ForgeKind.PAGURE, "https"),
    ("git.savannah.gnu.org", ForgeKind.SAVANNAH, "https"),
    ("git.savannah.nongnu.org", ForgeKind.SAVANNAH, "https"),
    ("git.sv.gnu.org", ForgeKind.SAVANNAH, "https"),
    ("sr.ht", ForgeKind.SOURCEHUT, "https"),
)

_registry: tuple[ForgeRule, ...] | None = None
_lock = threading.Lock()


def default_table() -> list[ForgeRow]:
    """The built-in forge table followed by rows from settings."""
    from forgelink.config.settings import get_settings

    return [*DEFAULT_FORGES, *get_settings().extra_forges]


def build_registry(table: Iterable[ForgeRow]) -> tuple[ForgeRule, ...]:
    """Compile table rows into rules, keeping the table order.

    Raises:
        MalformedExtraArgumentsError: If a row has an odd number of extras.
        DuplicateForgeError: If two rows share a host domain.
    """
    rules: list[ForgeRule] = []
    seen: set[str] = set()
    for row in table:
        entry = row if isinstance(row, ForgeEntry) else ForgeEntry.from_row(row)
        domain = entry.host_domain.lower()
        if domain in seen:
            raise DuplicateForgeError(
                f"Forge host registered twice: {entry.host_domain}",
                details={"host_domain": entry.host_domain},
            )
        seen.add(domain)
        rules.append(build_rule(entry))
    return tuple(rules)


def get_registry() -> tuple[ForgeRule, ...]:
    """Return the process-wide registry, building it on first use."""
    global _registry
    if _registry is None:
        with _lock:
            if _registry is None:
                _registry = build_registry(default_table())
                logger.debug("Forge registry built", rules=len(_registry))
    return _registry


def rebuild_registry(table: Iterable[ForgeRow] | None = None) -> tuple[ForgeRule, ...]:
    """Rebuild the process-wide registry from ``table`` (default table if None)."""
    global _registry
    with _lock:
        _registry = build_registry(default_table() if table is None else table)
        logger.debug("Forge registry rebuilt", rules=len(_registry))
    return _registry
