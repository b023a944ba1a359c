"""forgelink: permalinks to files on their hosting forge."""

__version__ = "0.1.0"
