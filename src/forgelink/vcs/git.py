"""Git backend using subprocess."""

import subprocess
from pathlib import Path

from forgelink.core.exceptions import RemoteLookupError
from forgelink.vcs.base import RepoInfo


class GitRepoInfo(RepoInfo):
    """Reads repository facts with the git CLI (no gitpython dependency)."""

    name = "git"
    default_remote = "origin"
    executable = "git"

    def _root_command(self, cwd: Path) -> str:
        return self._run(cwd, "rev-parse", "--show-toplevel")

    def get_remote_url(self, root: Path, remote: str) -> str:
        try:
            url = self._run(root, "remote", "get-url", remote)
        except subprocess.CalledProcessError as e:
            raise RemoteLookupError(remote) from e
        if not url:
            raise RemoteLookupError(remote)
        return url

    def get_working_revision(self, root: Path) -> str:
        """Get the current HEAD commit hash."""
        return self._run(root, "rev-parse", "HEAD")

    def is_tracked(self, root: Path, path: str | Path) -> bool:
        relative = self.relative_path(root, path)
        # Literal pathspecs: file names may contain glob characters
        return self._succeeds(
            root, "--literal-pathspecs", "ls-files", "--error-unmatch", "--", relative
        )
