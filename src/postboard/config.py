"""Environment-driven settings (``POSTBOARD_*`` variables or ``.env``)."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POSTBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    DATA_DIR: Path = Path("data")
    DATABASE_URL: str | None = None

    # External auth collaborator
    AUTH_URL: str = "http://127.0.0.1:54321"
    AUTH_API_KEY: SecretStr | None = None
    AUTH_TIMEOUT: float = 10.0
    SESSION_COOKIE: str = "access_token"
    LOGIN_PATH: str = "/login"

    # Dashboard
    UPCOMING_LIMIT: int = Field(default=3, ge=1)
    TIMEZONE: str | None = None

    LOG_LEVEL: str = "INFO"

    @property
    def data_dir(self) -> Path:
        return self.DATA_DIR

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATA_DIR / 'postboard.db'}"


settings = Settings()
