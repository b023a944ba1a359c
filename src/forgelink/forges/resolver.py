"""Link resolver: turns a remote URL into a forge permalink."""

from collections.abc import Sequence
from typing import Any

import structlog

from forgelink.core.exceptions import NoMatchError, UntrackedFileError
from forgelink.core.models.forge import ForgeRule
from forgelink.core.models.link import LinkRequest, Selection
from forgelink.forges.registry import get_registry
from forgelink.forges.templates import quote_path

logger = structlog.get_logger(__name__)


class LinkResolver:
    """Resolves a ``LinkRequest`` against the forge rules, first match wins.

    When no rules are given, the process-wide registry is used.
    """

    def __init__(self, rules: Sequence[ForgeRule] | None = None) -> None:
        self._rules = tuple(rules) if rules is not None else None

    @property
    def rules(self) -> tuple[ForgeRule, ...]:
        return self._rules if self._rules is not None else get_registry()

    def match(self, remote_url: str) -> ForgeRule | None:
        """Return the rule that handles ``remote_url``, if any."""
        for rule in self.rules:
            if rule.match(remote_url) is not None:
                return rule
        return None

    def resolve(self, request: LinkRequest) -> str:
        """Format the permalink for ``request``.

        Raises:
            NoMatchError: If no forge rule matches the remote URL.
        """
        for rule in self.rules:
            captures = rule.match(request.remote_url)
            if captures is None:
                continue

            context = self._build_context(rule, request, captures)
            url = rule.format_template(context)
            logger.debug(
                "Resolved link",
                forge=rule.kind.value,
                host=rule.host_domain,
                url=url,
            )
            return url

        logger.debug("No forge matched remote", remote_url=request.remote_url)
        raise NoMatchError(request.remote_url)

    @staticmethod
    def _build_context(
        rule: ForgeRule, request: LinkRequest, captures: dict[str, str]
    ) -> dict[str, Any]:
        context: dict[str, Any] = {
            "protocol": rule.protocol,
            "host": rule.host_domain,
            "revision": request.revision,
            "path": quote_path(request.path),
        }
        selection = request.selection
        if selection is not None:
            context["line_start"] = selection.line_start
            if selection.is_range:
                context["line_end"] = selection.line_end
        context.update(captures)
        context.update(rule.extra)
        return context


def resolve_link(
    remote_url: str,
    path: str,
    revision: str,
    selection: Selection | None = None,
    tracked: bool = True,
    backend: str = "vcs",
    resolver: LinkResolver | None = None,
) -> str:
    """Resolve a permalink from plain values.

    Raises:
        UntrackedFileError: If ``tracked`` is false; no matching is attempted.
        NoMatchError: If no forge rule matches ``remote_url``.
    """
    if not tracked:
        raise UntrackedFileError(path, backend)

    request = LinkRequest(
        remote_url=remote_url,
        path=path,
        revision=revision,
        selection=selection,
    )
    return (resolver or LinkResolver()).resolve(request)
