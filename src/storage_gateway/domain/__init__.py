"""Domain layer exports."""

from storage_gateway.domain.errors import (
    ErrorCollector,
    ErrorKind,
    ErrorRecord,
    OperationError,
    OperationResult,
)
from storage_gateway.domain.existence_cache import ExistenceCache
from storage_gateway.domain.models import (
    BucketInfo,
    DeleteObjectsOutcome,
    DeletionFailure,
    ObjectInfo,
    StoredObject,
    UploadedPart,
)

__all__ = [
    "BucketInfo",
    "DeleteObjectsOutcome",
    "DeletionFailure",
    "ErrorCollector",
    "ErrorKind",
    "ErrorRecord",
    "ExistenceCache",
    "ObjectInfo",
    "OperationError",
    "OperationResult",
    "StoredObject",
    "UploadedPart",
]
