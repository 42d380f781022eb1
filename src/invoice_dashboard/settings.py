from typing import Literal, Optional, List

from pydantic import AnyHttpUrl, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from invoice_dashboard.errors import ConfigurationError

DEV_AUTH_SECRET = "dev-secret-unsafe"


class BackendSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="API_", extra="ignore")
    url: Optional[AnyHttpUrl] = None  # API_URL
    timeout_seconds: float = 10.0
    max_retries: int = 2  # connection retries, GET only


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="AUTH_", extra="ignore")
    secret: SecretStr = SecretStr(DEV_AUTH_SECRET)
    session_max_age_seconds: int = 30 * 24 * 60 * 60
    cookie_name: str = "session-token"
    secure_cookie: bool = False  # True behind HTTPS


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    verify_ssl: bool = True

    # ---- API server configuration ----
    api_host: str = "127.0.0.1"  # localhost for dev, 0.0.0.0 for docker/prod
    api_port: int = 3000
    api_reload: bool = True  # Auto-reload on code changes (dev only)
    api_workers: int = 1
    cors_origins: List[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_ENV, APP_LOG_LEVEL, etc.
        env_nested_delimiter='__',
        extra = "ignore"
    )

    # ---- integrations ----
    backend: BackendSettings = Field(default_factory=BackendSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)

    @model_validator(mode="after")
    def _require_auth_secret_in_prod(self) -> "Settings":
        if self.env == "prod" and self.auth.secret.get_secret_value() == DEV_AUTH_SECRET:
            raise ValueError("AUTH_SECRET must be set when APP_ENV=prod")
        return self


def get_settings() -> Settings:
    """Build settings from the environment and .env on each call."""
    return Settings()


def get_api_url() -> str:
    """Base URL of the backend API, without trailing slash."""
    url = get_settings().backend.url
    if url is None:
        raise ConfigurationError("API_URL is not defined.")
    return str(url).rstrip("/")
