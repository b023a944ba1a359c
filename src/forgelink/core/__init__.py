"""Core domain models and exceptions for forgelink."""

from forgelink.core.exceptions import (
    ConfigurationError,
    DuplicateForgeError,
    ForgeLinkError,
    MalformedExtraArgumentsError,
    NoMatchError,
    RemoteLookupError,
    RepositoryError,
    RootResolutionError,
    UntrackedFileError,
)
from forgelink.core.models import (
    ForgeEntry,
    ForgeKind,
    ForgeRule,
    LinkRequest,
    Selection,
)

__all__ = [
    # Models
    "ForgeKind",
    "ForgeEntry",
    "ForgeRule",
    "Selection",
    "LinkRequest",
    # Exceptions
    "ForgeLinkError",
    "ConfigurationError",
    "MalformedExtraArgumentsError",
    "DuplicateForgeError",
    "RepositoryError",
    "RootResolutionError",
    "UntrackedFileError",
    "RemoteLookupError",
    "NoMatchError",
]
