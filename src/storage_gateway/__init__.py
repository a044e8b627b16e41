from storage_gateway.config import AppConfig, CacheConfig, S3Config, load_config
from storage_gateway.domain import (
    ErrorCollector,
    ErrorKind,
    ErrorRecord,
    ExistenceCache,
    OperationError,
    OperationResult,
)
from storage_gateway.domain.operations import StorageGateway
from storage_gateway.exceptions import (
    GatewayError,
    OperationFailedError,
    ParameterValidationError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageUnavailableError,
)
from storage_gateway.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "CacheConfig",
    "S3Config",
    "load_config",
    "ErrorCollector",
    "ErrorKind",
    "ErrorRecord",
    "ExistenceCache",
    "OperationError",
    "OperationResult",
    "StorageGateway",
    "GatewayError",
    "OperationFailedError",
    "ParameterValidationError",
    "StorageError",
    "StorageNotFoundError",
    "StoragePermissionError",
    "StorageUnavailableError",
]
