"""Exception hierarchy for forgelink."""

from typing import Any


class ForgeLinkError(Exception):
    """Base exception for all forgelink errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ForgeLinkError):
    """Invalid forge table or settings."""


class MalformedExtraArgumentsError(ConfigurationError, ValueError):
    """A forge table row has an odd number of extra key/value items.

    This is a programming error in the table, not a runtime condition.
    """


class DuplicateForgeError(ConfigurationError):
    """Two forge table rows share the same host domain."""


class RepositoryError(ForgeLinkError):
    """Errors raised while talking to the version-control backend."""


class RootResolutionError(RepositoryError):
    """The path is not inside any recognized repository."""


class UntrackedFileError(RepositoryError):
    """The file exists but is not under version control."""

    def __init__(self, path: str, backend: str) -> None:
        super().__init__(
            f"{path} is not tracked by {backend}",
            details={"path": path, "backend": backend},
        )
        self.path = path
        self.backend = backend


class RemoteLookupError(RepositoryError):
    """A candidate remote has no configured URL."""

    def __init__(self, remote: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Remote has no URL: {remote}",
            details={"remote": remote},
        )
        self.remote = remote


class NoMatchError(ForgeLinkError):
    """No registered forge matches the remote URL."""

    def __init__(self, remote_url: str | None = None) -> None:
        super().__init__(
            "Could not build a remote link",
            details={"remote_url": remote_url} if remote_url else None,
        )
        self.remote_url = remote_url
