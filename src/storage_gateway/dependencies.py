"""FastAPI dependency injection configuration."""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends

from storage_gateway.config import AppConfig, load_config
from storage_gateway.domain import ErrorCollector, ExistenceCache
from storage_gateway.domain.operations import StorageGateway
from storage_gateway.infrastructure import S3Storage, create_s3_client
from storage_gateway.interfaces import StorageClient
from storage_gateway.logging import setup_logging

_config = load_config()

logger = setup_logging(_config.log_level)

_s3_client = create_s3_client(_config.s3)
_storage = S3Storage(_s3_client)
_cache = ExistenceCache(
    ttl_seconds=_config.cache.ttl_seconds,
    max_entries=_config.cache.max_entries,
)

logger.info(
    "Storage client configured",
    extra={
        "region": _config.s3.region,
        "endpoint_url": _config.s3.endpoint_url,
        "cache_ttl_seconds": _config.cache.ttl_seconds,
        "cache_max_entries": _config.cache.max_entries,
    },
)


def get_config() -> AppConfig:
    """Returns the configuration loaded at startup."""
    return _config


def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    return _storage


def get_existence_cache() -> ExistenceCache:
    """Returns the process-wide existence cache."""
    return _cache


async def get_gateway(
    storage: Annotated[StorageClient, Depends(get_storage)],
    cache: Annotated[ExistenceCache, Depends(get_existence_cache)],
    config: Annotated[AppConfig, Depends(get_config)],
) -> AsyncIterator[StorageGateway]:
    """
    Yields a gateway with an error collector scoped to the current request.

    The collector is cleared once the request finishes, whether it succeeded
    or failed.
    """
    errors = ErrorCollector()
    try:
        yield StorageGateway(storage, cache, errors, config.presign_expires_in)
    finally:
        errors.clear()
