"""Application configuration via pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Reported back to Ozon in every ping acknowledgement
APP_NAME = "OzonEventReceiver"
APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"

    # Feishu custom bot webhook (required): the service refuses to start without it
    feishu_webhook_url: str
    notify_timeout: float = 10.0

    @field_validator("feishu_webhook_url")
    @classmethod
    def _check_webhook_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("FEISHU_WEBHOOK_URL must be set")
        if not value.startswith(("http://", "https://")):
            raise ValueError("FEISHU_WEBHOOK_URL must be an http(s) URL")
        return value

    @field_validator("notify_timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("NOTIFY_TIMEOUT must be positive")
        return value


settings = Settings()
