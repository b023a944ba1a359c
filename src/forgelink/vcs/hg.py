"""Mercurial backend using subprocess."""

import subprocess
from pathlib import Path

from forgelink.core.exceptions import RemoteLookupError
from forgelink.vcs.base import RepoInfo


class HgRepoInfo(RepoInfo):
    """Reads repository facts with the hg CLI."""

    name = "hg"
    default_remote = "default"
    executable = "hg"

    def _run(self, cwd: Path, *args: str) -> str:
        # Keep user config (aliases, pager, color) out of parsed output
        return super()._run(cwd, "--config", "ui.color=never", "--pager", "never", *args)

    def _root_command(self, cwd: Path) -> str:
        return self._run(cwd, "root")

    def get_remote_url(self, root: Path, remote: str) -> str:
        try:
            url = self._run(root, "paths", remote)
        except subprocess.CalledProcessError as e:
            raise RemoteLookupError(remote) from e
        if not url:
            raise RemoteLookupError(remote)
        return url

    def get_working_revision(self, root: Path) -> str:
        """Full changeset id of the working directory parent.

        The local revision number is not stable across clones, so the
        node hash is used instead.
        """
        return self._run(root, "log", "-r", ".", "-T", "{node}")

    def is_tracked(self, root: Path, path: str | Path) -> bool:
        relative = self.relative_path(root, path)
        return self._succeeds(root, "files", "--", relative)
