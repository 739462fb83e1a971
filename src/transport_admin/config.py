"""Application settings, read from the environment and ``.env``."""
from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Backend base URL used by the request detail page.
    NEXT_PUBLIC_API_BASE_URL: str = "http://localhost:3000"
    # Backend base URL used by the dashboard API and the maintenance commands.
    API_BASE_URL: str = "http://localhost:3000"
    JWT_TOKEN: SecretStr | None = None

    DASHBOARD_API_URL: str = "http://127.0.0.1:8000"
    LOG_LEVEL: str = "INFO"

    @property
    def jwt_token(self) -> str:
        """Raw token value, or empty string when unset."""
        return self.JWT_TOKEN.get_secret_value() if self.JWT_TOKEN else ""


settings = Settings()
