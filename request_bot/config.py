import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvConfig(BaseSettings):
    """Environment configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


class Settings(EnvConfig):
    """Manages application settings using Pydantic."""

    log_level: int = logging.INFO
    prefix: str = "/"
    token: str = ""
    debug_guild_id: int | None = None

    # Request System Configuration
    admin_id: int = 0
    requests_file: Path = Path("requests.json")

    # Privileged; must also be enabled in the Developer Portal
    message_content_intent: bool = False

    def require_credentials(self) -> None:
        """Ensure the settings needed to run the bot are present."""
        missing = [name for name, value in (("TOKEN", self.token), ("ADMIN_ID", self.admin_id)) if not value]
        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)


settings = Settings()
