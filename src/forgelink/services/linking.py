"""Link service: from a file in a working copy to its forge permalink."""

import subprocess
from pathlib import Path

import structlog

from forgelink.core.exceptions import (
    NoMatchError,
    RemoteLookupError,
    RepositoryError,
    UntrackedFileError,
)
from forgelink.core.models.link import LinkRequest, Selection
from forgelink.forges.resolver import LinkResolver
from forgelink.vcs import RepoInfo, detect_repo_info

logger = structlog.get_logger(__name__)


class LinkService:
    """Builds permalinks for files in local repositories.

    The backend is detected from the path unless one is given.
    """

    def __init__(
        self,
        repo_info: RepoInfo | None = None,
        resolver: LinkResolver | None = None,
        remote_candidates: list[str] | None = None,
    ) -> None:
        self._repo_info = repo_info
        self._resolver = resolver or LinkResolver()
        self._remote_candidates = remote_candidates

    def _locate(self, path: str | Path) -> tuple[RepoInfo, Path]:
        if self._repo_info is not None:
            return self._repo_info, self._repo_info.resolve_root(path)
        return detect_repo_info(path)

    def _candidates(self, repo_info: RepoInfo, root: Path, remote: str | None) -> list[str]:
        if remote:
            return [remote]
        if self._remote_candidates:
            return list(self._remote_candidates)
        return repo_info.list_remote_candidates(root)

    def find_remote_url(
        self, repo_info: RepoInfo, root: Path, remote: str | None = None
    ) -> str | None:
        """URL of the first candidate remote that has one."""
        for name in self._candidates(repo_info, root, remote):
            try:
                url = repo_info.get_remote_url(root, name)
            except RemoteLookupError:
                logger.debug("Remote lookup failed", remote=name, backend=repo_info.name)
                continue
            logger.debug("Using remote", remote=name, url=url)
            return url
        return None

    def build_request(
        self,
        path: str | Path,
        selection: Selection | None = None,
        remote: str | None = None,
    ) -> LinkRequest:
        """Collect the facts needed to format a link for ``path``.

        Raises:
            RootResolutionError: If ``path`` is not inside a repository.
            UntrackedFileError: If ``path`` is not under version control.
            NoMatchError: If no candidate remote has a URL.
        """
        repo_info, root = self._locate(path)

        if not repo_info.is_tracked(root, path):
            raise UntrackedFileError(str(path), repo_info.name)

        remote_url = self.find_remote_url(repo_info, root, remote)
        if remote_url is None:
            raise NoMatchError()

        try:
            revision = repo_info.get_working_revision(root)
        except subprocess.CalledProcessError as e:
            raise RepositoryError(
                f"Could not read the working revision of {root}",
                details={"root": str(root), "backend": repo_info.name},
            ) from e

        return LinkRequest(
            remote_url=remote_url,
            path=repo_info.relative_path(root, path),
            revision=revision,
            selection=selection,
        )

    def link_for_path(
        self,
        path: str | Path,
        selection: Selection | None = None,
        remote: str | None = None,
    ) -> str:
        """Build the permalink for ``path`` and the selected lines."""
        request = self.build_request(path, selection, remote)
        return self._resolver.resolve(request)
