"""Per-forge remote patterns and link templates.

Every ``ForgeKind`` maps to exactly one pattern builder and one set of
templates. Templates use ``{key}`` placeholders filled from a context
mapping; the line fragments are appended only when their keys are present.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple
from urllib.parse import quote

from forgelink.core.models.forge import ForgeEntry, ForgeKind, ForgeRule

NAMESPACE = r"[.A-Za-z0-9_/-]+?"

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


class LinkTemplate(NamedTuple):
    """Base URL template plus the line fragments a forge understands."""

    base: str
    start: str
    end: str | None = None


GITHUB_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/{namespace}/blob/{revision}/{path}", "#L{line_start}", "-L{line_end}"
)
GITLAB_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/{namespace}/-/blob/{revision}/{path}", "#L{line_start}", "-L{line_end}"
)
GITEA_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/{namespace}/src/commit/{revision}/{path}", "#L{line_start}", "-L{line_end}"
)
BITBUCKET_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/{namespace}/src/{revision}/{path}", "#lines-{line_start}", ":{line_end}"
)
PAGURE_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/{namespace}/blob/{revision}/f/{path}", "#_{line_start}", "-{line_end}"
)
# cgit and sourcehut have no line range syntax
SAVANNAH_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/cgit/{namespace}/tree/{path}?id={revision}", "#n{line_start}"
)
SOURCEHUT_GIT_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/{namespace}/tree/{revision}/{path}", "#L{line_start}"
)
SOURCEHUT_HG_TEMPLATE = LinkTemplate(
    "{protocol}://{host}/{namespace}/browse/{path}?rev={revision}", "#L{line_start}"
)


def substitute(template: str, context: Mapping[str, Any]) -> str:
    """Replace ``{key}`` placeholders in ``template`` with values from ``context``.

    Raises:
        KeyError: If a placeholder has no value in ``context``.
    """
    return _PLACEHOLDER_RE.sub(lambda m: str(context[m.group(1)]), template)


def render(template: LinkTemplate, context: Mapping[str, Any]) -> str:
    """Render a link, appending line fragments for the keys that are present."""
    url = substitute(template.base, context)
    if context.get("line_start") is not None:
        url += substitute(template.start, context)
        if template.end is not None and context.get("line_end") is not None:
            url += substitute(template.end, context)
    return url


def _path_pattern(host: str) -> str:
    return rf"[/@]{host}[/:](?P<namespace>{NAMESPACE})(?:\.git)?/?$"


def _savannah_pattern(host: str) -> str:
    # ssh remotes look like user@git.sv.gnu.org:/srv/git/emacs.git
    return rf"[/@]{host}[/:]/?(?:srv/)?(?:git/)?(?P<namespace>{NAMESPACE}\.git)$"


def _sourcehut_pattern(host: str) -> str:
    return rf"[/@](?P<host>(?:git|hg)\.{host})[/:](?P<namespace>~{NAMESPACE})(?:\.git)?/?$"


def _fixed(template: LinkTemplate) -> Callable[[Mapping[str, Any]], str]:
    def format_template(context: Mapping[str, Any]) -> str:
        return render(template, context)

    return format_template


def _sourcehut(context: Mapping[str, Any]) -> str:
    if str(context["host"]).lower().startswith("hg."):
        return render(SOURCEHUT_HG_TEMPLATE, context)
    return render(SOURCEHUT_GIT_TEMPLATE, context)


def builders_for(kind: ForgeKind) -> tuple[Callable[[str], str], Callable[[Mapping[str, Any]], str]]:
    """Return the ``(pattern builder, formatter)`` pair for a forge kind."""
    if kind == ForgeKind.GITHUB:
        return _path_pattern, _fixed(GITHUB_TEMPLATE)
    elif kind == ForgeKind.GITLAB:
        return _path_pattern, _fixed(GITLAB_TEMPLATE)
    elif kind == ForgeKind.GITEA:
        return _path_pattern, _fixed(GITEA_TEMPLATE)
    elif kind == ForgeKind.BITBUCKET:
        return _path_pattern, _fixed(BITBUCKET_TEMPLATE)
    elif kind == ForgeKind.PAGURE:
        return _path_pattern, _fixed(PAGURE_TEMPLATE)
    elif kind == ForgeKind.SAVANNAH:
        return _savannah_pattern, _fixed(SAVANNAH_TEMPLATE)
    elif kind == ForgeKind.SOURCEHUT:
        return _sourcehut_pattern, _sourcehut
    raise ValueError(f"Unknown forge kind: {kind}")


def build_rule(entry: ForgeEntry) -> ForgeRule:
    """Compile a forge table entry into a matching rule."""
    pattern_builder, formatter = builders_for(entry.kind)
    return ForgeRule(
        host_domain=entry.host_domain,
        kind=entry.kind,
        protocol=entry.protocol,
        extra=entry.extra,
        match_pattern=re.compile(pattern_builder(re.escape(entry.host_domain)), re.IGNORECASE),
        format_template=formatter,
    )


def quote_path(path: str) -> str:
    """Percent-quote a repository path for use in a URL."""
    return quote(path, safe="/")
