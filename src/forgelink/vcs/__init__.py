"""Version-control backends for forgelink."""

from pathlib import Path

import structlog

from forgelink.core.exceptions import ConfigurationError, RootResolutionError
from forgelink.vcs.base import RepoInfo
from forgelink.vcs.git import GitRepoInfo
from forgelink.vcs.hg import HgRepoInfo

logger = structlog.get_logger(__name__)

BACKENDS: dict[str, type[RepoInfo]] = {
    "git": GitRepoInfo,
    "hg": HgRepoInfo,
}


def create_repo_info(name: str) -> RepoInfo:
    """Create a backend by name."""
    try:
        return BACKENDS[name.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown VCS backend: {name}", details={"backend": name}
        ) from None


def detect_repo_info(
    path: str | Path, backends: list[str] | None = None
) -> tuple[RepoInfo, Path]:
    """Find the backend managing ``path`` and its repository root.

    Backends are tried in order; the first that resolves a root wins.

    Raises:
        RootResolutionError: If no backend recognizes ``path``.
    """
    if backends is None:
        from forgelink.config.settings import get_settings

        backends = get_settings().backends

    for name in backends:
        repo_info = create_repo_info(name)
        try:
            root = repo_info.resolve_root(path)
        except RootResolutionError:
            logger.debug("Backend does not manage path", backend=name, path=str(path))
            continue
        return repo_info, root

    raise RootResolutionError(
        f"Not inside a known repository: {path}",
        details={"path": str(path), "backends": list(backends)},
    )


__all__ = [
    "RepoInfo",
    "GitRepoInfo",
    "HgRepoInfo",
    "BACKENDS",
    "create_repo_info",
    "detect_repo_info",
]
