"""Version-control backend interface."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from forgelink.core.exceptions import RootResolutionError

logger = structlog.get_logger(__name__)


class RepoInfo(ABC):
    """What the link service needs to know about a working copy.

    Implementations drive the backend's command-line tool.
    """

    #: Short backend name used in messages, e.g. "git"
    name: str
    #: Remote used when no named candidate is configured
    default_remote: str
    #: Executable to run
    executable: str

    def _run(self, cwd: Path, *args: str) -> str:
        """Run a backend command in ``cwd`` and return stripped stdout."""
        result = subprocess.run(
            [self.executable, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def _succeeds(self, cwd: Path, *args: str) -> bool:
        """Run a backend command and report whether it exited with 0."""
        try:
            self._run(cwd, *args)
            return True
        except subprocess.CalledProcessError:
            return False

    @staticmethod
    def _start_dir(path: str | Path) -> Path:
        path = Path(path).expanduser()
        if path.is_dir():
            return path.resolve()
        return path.parent.resolve()

    def resolve_root(self, path: str | Path) -> Path:
        """Return the root of the working copy containing ``path``.

        Raises:
            RootResolutionError: If ``path`` is not inside a repository.
        """
        start = self._start_dir(path)
        if not start.exists():
            raise RootResolutionError(
                f"Path does not exist: {path}",
                details={"path": str(path), "backend": self.name},
            )
        try:
            root = self._root_command(start)
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            raise RootResolutionError(
                f"Not a {self.name} repository: {path}",
                details={"path": str(path), "backend": self.name},
            ) from e
        if not root:
            raise RootResolutionError(
                f"Not a {self.name} repository: {path}",
                details={"path": str(path), "backend": self.name},
            )
        return Path(root).resolve()

    def list_remote_candidates(self, root: Path) -> list[str]:
        """Remote names to try, in order."""
        return ["upstream", self.default_remote]

    def relative_path(self, root: Path, path: str | Path) -> str:
        """Path of ``path`` relative to ``root``, with forward slashes."""
        # Only the directory is resolved so a symlinked file keeps its own name
        path = Path(path).expanduser()
        return (path.parent.resolve() / path.name).relative_to(root).as_posix()

    @abstractmethod
    def _root_command(self, cwd: Path) -> str:
        """Ask the backend for the repository root."""

    @abstractmethod
    def get_remote_url(self, root: Path, remote: str) -> str:
        """URL of ``remote``.

        Raises:
            RemoteLookupError: If the remote is missing or has no URL.
        """

    @abstractmethod
    def get_working_revision(self, root: Path) -> str:
        """Identifier of the checked-out commit or changeset."""

    @abstractmethod
    def is_tracked(self, root: Path, path: str | Path) -> bool:
        """Whether ``path`` is under version control."""
