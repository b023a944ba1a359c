"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``FORGELINK_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FORGELINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False

    # Remote names to try, in order; None means ["upstream", <backend default>]
    remote_candidates: list[str] | None = None

    # Backend detection order: "git" | "hg"
    backends: list[str] = ["git", "hg"]

    # Rows appended to the built-in forge table, e.g.
    # [["git.example.com", "gitlab", "https", "host", "gitlab.example.com"]]
    extra_forges: list[list[str]] = []

    # CLI
    copy_to_clipboard: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
