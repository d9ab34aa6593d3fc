from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HARVESTDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # API
    PROJECT_NAME: str = "harvestdoc"
    VERSION: str = "0.1.0"

    # HTTP service
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Remote catalog
    REQUEST_TIMEOUT: float = 5.0

    # ECDHE suites first for forward secrecy; no RC4, 3DES or non-ECDHE fallbacks.
    TLS_CIPHERS: str = (
        "ECDHE-ECDSA-AES128-GCM-SHA256:ECDHE-RSA-AES128-GCM-SHA256:"
        "ECDHE-ECDSA-AES256-GCM-SHA384:ECDHE-RSA-AES256-GCM-SHA384:"
        "ECDHE-ECDSA-CHACHA20-POLY1305:ECDHE-RSA-CHACHA20-POLY1305:"
        "ECDHE-RSA-AES256-SHA:ECDHE-RSA-AES128-SHA"
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).strip().upper()


settings = Settings()
