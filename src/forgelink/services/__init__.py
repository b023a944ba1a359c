"""Service layer for forgelink."""

from forgelink.services.linking import LinkService

__all__ = ["LinkService"]
