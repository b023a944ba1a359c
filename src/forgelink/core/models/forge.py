"""Forge table and compiled rule models."""

import re
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from forgelink.core.exceptions import ConfigurationError, MalformedExtraArgumentsError


class ForgeKind(str, Enum):
    """Hosting forge flavors with a known URL scheme."""

    GITHUB = "github"
    GITLAB = "gitlab"
    GITEA = "gitea"
    BITBUCKET = "bitbucket"
    PAGURE = "pagure"
    SAVANNAH = "savannah"
    SOURCEHUT = "sourcehut"


class ForgeEntry(BaseModel):
    """One row of the forge table, before compilation."""

    model_config = ConfigDict(frozen=True)

    host_domain: str
    kind: ForgeKind
    protocol: str = "https"
    # Extra template placeholders, applied over the match context
    extra: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "ForgeEntry":
        """Build an entry from a flat ``(host, kind, protocol, k1, v1, ...)`` row.

        Raises:
            ConfigurationError: If the row is too short or names an unknown kind.
            MalformedExtraArgumentsError: If the extras do not come in pairs.
        """
        if len(row) < 2:
            raise ConfigurationError(
                f"Forge row needs at least a host and a kind: {list(row)!r}",
                details={"row": list(row)},
            )

        host_domain, kind, *rest = row
        protocol = rest.pop(0) if rest else "https"
        if len(rest) % 2:
            raise MalformedExtraArgumentsError(
                f"Odd number of extra arguments for forge {host_domain}",
                details={"host_domain": host_domain, "extra": list(rest)},
            )

        try:
            kind = ForgeKind(kind)
        except ValueError:
            raise ConfigurationError(
                f"Unknown forge kind for {host_domain}: {kind}",
                details={"host_domain": host_domain, "kind": str(kind)},
            ) from None

        extra = {str(key): str(value) for key, value in zip(rest[::2], rest[1::2])}
        return cls(
            host_domain=host_domain,
            kind=kind,
            protocol=protocol,
            extra=extra,
        )


class ForgeRule(BaseModel):
    """A compiled forge entry: a remote URL pattern plus its link formatter."""

    model_config = ConfigDict(frozen=True)

    host_domain: str
    kind: ForgeKind
    protocol: str
    extra: dict[str, str] = Field(default_factory=dict)
    match_pattern: re.Pattern
    format_template: Callable[[Mapping[str, Any]], str]

    def match(self, remote_url: str) -> dict[str, str] | None:
        """Return the named captures if ``remote_url`` belongs to this forge."""
        found = self.match_pattern.search(remote_url)
        if found is None:
            return None
        return {key: value for key, value in found.groupdict().items() if value is not None}
