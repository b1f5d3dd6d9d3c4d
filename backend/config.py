"""Application settings loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # Logging
    log_level: str = "info"

    # An empty PORT= falls back to the default instead of failing validation
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def public_url(self) -> str:
        """URL to reach the server from the local machine."""
        return f"http://localhost:{self.port}"


settings = Settings()
