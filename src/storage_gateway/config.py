"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field


class S3Config(BaseModel, frozen=True):
    """S3-compatible storage connection configuration."""

    region: str = Field(default="us-east-1", min_length=1)
    access_key_id: str = ""
    secret_access_key: str = ""
    endpoint_url: str | None = None
    # Total attempts per call, the first one included.
    max_attempts: int = Field(default=3, ge=1)
    connect_timeout: float = Field(default=5.0, gt=0)
    read_timeout: float = Field(default=60.0, gt=0)


class CacheConfig(BaseModel, frozen=True):
    """Existence cache bounds. Zero disables the corresponding limit."""

    ttl_seconds: float = Field(default=0, ge=0)
    max_entries: int = Field(default=0, ge=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    s3: S3Config
    cache: CacheConfig = CacheConfig()
    api_prefix: str = "/s3"
    presign_expires_in: int = Field(default=900, ge=1)
    port: int = 4000
    log_level: str = "INFO"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        s3=S3Config(
            region=os.getenv("AWS_REGION", "us-east-1"),
            access_key_id=os.getenv("S3_ACCESS_KEY", ""),
            secret_access_key=os.getenv("S3_SECRET_KEY", ""),
            endpoint_url=os.getenv("S3_ENDPOINT_URL") or None,
            max_attempts=int(os.getenv("S3_MAX_ATTEMPTS", "3")),
            connect_timeout=float(os.getenv("S3_CONNECT_TIMEOUT", "5")),
            read_timeout=float(os.getenv("S3_READ_TIMEOUT", "60")),
        ),
        cache=CacheConfig(
            ttl_seconds=float(os.getenv("EXISTENCE_CACHE_TTL_SECONDS", "0")),
            max_entries=int(os.getenv("EXISTENCE_CACHE_MAX_ENTRIES", "0")),
        ),
        api_prefix=os.getenv("API_PREFIX", "/s3"),
        presign_expires_in=int(os.getenv("PRESIGN_EXPIRES_IN", "900")),
        port=int(os.getenv("PORT", "4000")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
