"""Storage operations with validation, existence caching and error collection."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, BinaryIO, NoReturn, TypeVar

from pydantic import BaseModel, ValidationError

from storage_gateway.domain.errors import (
    ErrorCollector,
    ErrorKind,
    OperationError,
    OperationResult,
)
from storage_gateway.domain.existence_cache import ExistenceCache
from storage_gateway.domain.models import (
    BucketInfo,
    DeleteObjectsOutcome,
    ObjectInfo,
    StoredObject,
    UploadedPart,
)
from storage_gateway.domain.validation import (
    BucketParams,
    CompleteMultipartParams,
    CopyParams,
    DeleteObjectsParams,
    ListObjectsParams,
    MultipartParams,
    ObjectParams,
    PresignOperation,
    PresignParams,
    UploadParams,
    UploadPartParams,
)
from storage_gateway.exceptions import (
    ParameterValidationError,
    StorageError,
    StorageNotFoundError,
)
from storage_gateway.interfaces import StorageClient

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")

DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_PRESIGN_EXPIRES_IN = 900


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
        for err in error.errors()
    )


class StorageGateway:
    """
    Runs storage operations against a StorageClient.

    Each operation validates its parameters, calls the storage client off the
    event loop, keeps the shared existence cache in step with successful
    mutations and records every failure in the gateway's error collector.

    Validation failures raise ParameterValidationError before storage is
    contacted. Storage failures are returned as a failed OperationResult whose
    value is None.

    Args:
        storage: Blocking storage client.
        cache: Existence cache shared by all gateways of the process.
        errors: Collector for this gateway's failures, normally one per request.
        presign_expires_in: Default presigned URL lifetime in seconds.
    """

    def __init__(
        self,
        storage: StorageClient,
        cache: ExistenceCache,
        errors: ErrorCollector | None = None,
        presign_expires_in: int = DEFAULT_PRESIGN_EXPIRES_IN,
    ):
        self._storage = storage
        self._cache = cache
        self._errors = errors if errors is not None else ErrorCollector()
        self._presign_expires_in = presign_expires_in

    @property
    def errors(self) -> ErrorCollector:
        return self._errors

    @property
    def cache(self) -> ExistenceCache:
        return self._cache

    # Buckets

    async def create_bucket(self, bucket: str) -> OperationResult[None]:
        params = self._validate("create_bucket", BucketParams, bucket=bucket)
        result = await self._call(
            "create_bucket",
            {"bucket": params.bucket},
            self._storage.create_bucket,
            params.bucket,
        )
        if result.ok:
            self._cache.mark_bucket(params.bucket, True)
        return result

    async def delete_bucket(self, bucket: str) -> OperationResult[None]:
        params = self._validate("delete_bucket", BucketParams, bucket=bucket)
        result = await self._call(
            "delete_bucket",
            {"bucket": params.bucket},
            self._storage.delete_bucket,
            params.bucket,
        )
        if result.ok:
            self._cache.unmark_bucket(params.bucket)
        return result

    async def list_buckets(self) -> OperationResult[list[BucketInfo]]:
        result = await self._call("list_buckets", {}, self._storage.list_buckets)
        if result.ok:
            for info in result.value:
                self._cache.mark_bucket(info.name, True)
        return result

    async def bucket_exists(
        self, bucket: str, use_cache: bool = True
    ) -> OperationResult[bool]:
        """
        Reports whether a bucket exists.

        A cached answer is returned without contacting storage unless
        ``use_cache`` is False. A not-found answer from storage is cached as
        False; any other failure is recorded and not cached.
        """
        params = self._validate("bucket_exists", BucketParams, bucket=bucket)
        if use_cache:
            cached = self._cache.bucket_exists_cached(params.bucket)
            if cached is not None:
                logger.debug(
                    "Existence cache hit",
                    extra={"bucket": params.bucket, "exists": cached},
                )
                return OperationResult.success(cached)
        return await self._check_existence(
            "bucket_exists",
            {"bucket": params.bucket},
            lambda: self._storage.head_bucket(params.bucket),
            lambda exists: self._cache.mark_bucket(params.bucket, exists),
        )

    # Objects

    async def upload_object(
        self,
        bucket: str,
        key: str,
        body: bytes | BinaryIO | None,
        content_type: str | None = DEFAULT_CONTENT_TYPE,
    ) -> OperationResult[None]:
        params = self._validate(
            "upload_object",
            UploadParams,
            bucket=bucket,
            key=key,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
        )
        context = {"bucket": params.bucket, "key": params.key}
        if body is None:
            self.reject("upload_object", context, "body is required")
        result = await self._call(
            "upload_object",
            {**context, "content_type": params.content_type},
            self._storage.put_object,
            params.bucket,
            params.key,
            body,
            params.content_type,
        )
        if result.ok:
            self._cache.mark_object(params.bucket, params.key, True)
        return result

    async def object_exists(
        self, bucket: str, key: str, use_cache: bool = True
    ) -> OperationResult[bool]:
        """Reports whether an object exists, with the same caching as bucket_exists."""
        params = self._validate("object_exists", ObjectParams, bucket=bucket, key=key)
        if use_cache:
            cached = self._cache.object_exists_cached(params.bucket, params.key)
            if cached is not None:
                logger.debug(
                    "Existence cache hit",
                    extra={"bucket": params.bucket, "key": params.key, "exists": cached},
                )
                return OperationResult.success(cached)
        return await self._check_existence(
            "object_exists",
            {"bucket": params.bucket, "key": params.key},
            lambda: self._storage.head_object(params.bucket, params.key),
            lambda exists: self._cache.mark_object(params.bucket, params.key, exists),
        )

    async def delete_object(self, bucket: str, key: str) -> OperationResult[None]:
        params = self._validate("delete_object", ObjectParams, bucket=bucket, key=key)
        result = await self._call(
            "delete_object",
            {"bucket": params.bucket, "key": params.key},
            self._storage.delete_object,
            params.bucket,
            params.key,
        )
        if result.ok:
            self._cache.unmark_object(params.bucket, params.key)
        return result

    async def delete_objects(
        self, bucket: str, keys: list[str]
    ) -> OperationResult[DeleteObjectsOutcome]:
        """
        Deletes several objects in one call.

        Keys the backend reports as failed make the whole result fail; every
        other key is treated as deleted and dropped from the cache.
        """
        params = self._validate(
            "delete_objects", DeleteObjectsParams, bucket=bucket, keys=keys
        )
        context = {"bucket": params.bucket, "keys": params.keys}
        result = await self._call(
            "delete_objects",
            context,
            self._storage.delete_objects,
            params.bucket,
            params.keys,
        )
        if not result.ok:
            return result

        outcome = result.value
        failed_keys = {failure.key for failure in outcome.failed}
        for key in params.keys:
            if key not in failed_keys:
                self._cache.unmark_object(params.bucket, key)
        if failed_keys:
            return self._failure(
                "delete_objects",
                ErrorKind.STORAGE,
                {
                    **context,
                    "failed": [f.model_dump() for f in outcome.failed],
                },
                f"{len(failed_keys)} of {len(params.keys)} objects could not be deleted",
            )
        return result

    async def list_objects(
        self, bucket: str, prefix: str | None = ""
    ) -> OperationResult[list[ObjectInfo]]:
        params = self._validate(
            "list_objects", ListObjectsParams, bucket=bucket, prefix=prefix or ""
        )
        return await self._call(
            "list_objects",
            {"bucket": params.bucket, "prefix": params.prefix},
            self._storage.list_objects,
            params.bucket,
            params.prefix,
        )

    async def get_object(self, bucket: str, key: str) -> OperationResult[StoredObject]:
        params = self._validate("get_object", ObjectParams, bucket=bucket, key=key)
        return await self._call(
            "get_object",
            {"bucket": params.bucket, "key": params.key},
            self._storage.get_object,
            params.bucket,
            params.key,
        )

    async def copy_object(
        self,
        source_bucket: str,
        source_key: str,
        dest_bucket: str,
        dest_key: str,
    ) -> OperationResult[None]:
        params = self._validate(
            "copy_object",
            CopyParams,
            source_bucket=source_bucket,
            source_key=source_key,
            dest_bucket=dest_bucket,
            dest_key=dest_key,
        )
        result = await self._call(
            "copy_object",
            params.model_dump(),
            self._storage.copy_object,
            params.source_bucket,
            params.source_key,
            params.dest_bucket,
            params.dest_key,
        )
        if result.ok:
            self._cache.mark_object(params.dest_bucket, params.dest_key, True)
        return result

    # Multipart uploads

    async def initiate_multipart_upload(
        self, bucket: str, key: str
    ) -> OperationResult[str]:
        params = self._validate(
            "initiate_multipart_upload", ObjectParams, bucket=bucket, key=key
        )
        return await self._call(
            "initiate_multipart_upload",
            {"bucket": params.bucket, "key": params.key},
            self._storage.create_multipart_upload,
            params.bucket,
            params.key,
        )

    async def upload_part(
        self,
        bucket: str,
        key: str,
        upload_id: str,
        part_number: int,
        body: bytes | None,
    ) -> OperationResult[UploadedPart]:
        params = self._validate(
            "upload_part",
            UploadPartParams,
            bucket=bucket,
            key=key,
            upload_id=upload_id,
            part_number=part_number,
        )
        context = params.model_dump()
        if body is None:
            self.reject("upload_part", context, "body is required")
        return await self._call(
            "upload_part",
            context,
            self._storage.upload_part,
            params.bucket,
            params.key,
            params.upload_id,
            params.part_number,
            body,
        )

    async def complete_multipart_upload(
        self,
        bucket: str,
        key: str,
        upload_id: str,
        parts: list[UploadedPart] | list[dict[str, Any]],
    ) -> OperationResult[None]:
        """
        Completes a multipart upload from its ordered part list.

        Part contiguity and completeness are left to the storage backend.
        """
        params = self._validate(
            "complete_multipart_upload",
            CompleteMultipartParams,
            bucket=bucket,
            key=key,
            upload_id=upload_id,
            parts=parts,
        )
        result = await self._call(
            "complete_multipart_upload",
            {
                "bucket": params.bucket,
                "key": params.key,
                "upload_id": params.upload_id,
                "parts": len(params.parts),
            },
            self._storage.complete_multipart_upload,
            params.bucket,
            params.key,
            params.upload_id,
            params.parts,
        )
        if result.ok:
            self._cache.mark_object(params.bucket, params.key, True)
        return result

    async def abort_multipart_upload(
        self, bucket: str, key: str, upload_id: str
    ) -> OperationResult[None]:
        params = self._validate(
            "abort_multipart_upload",
            MultipartParams,
            bucket=bucket,
            key=key,
            upload_id=upload_id,
        )
        return await self._call(
            "abort_multipart_upload",
            params.model_dump(),
            self._storage.abort_multipart_upload,
            params.bucket,
            params.key,
            params.upload_id,
        )

    # Presigned URLs

    async def generate_presigned_url(
        self,
        bucket: str,
        key: str,
        operation: str = PresignOperation.GET_OBJECT.value,
        expires_in: int | None = None,
    ) -> OperationResult[str]:
        """
        Signs a URL for retrieving (``getObject``) or uploading (``putObject``)
        one object. Any other operation is rejected without contacting storage.
        """
        params = self._validate(
            "generate_presigned_url",
            PresignParams,
            bucket=bucket,
            key=key,
            expires_in=self._presign_expires_in if expires_in is None else expires_in,
        )
        context = {**params.model_dump(), "operation": operation}
        try:
            presign_operation = PresignOperation(operation)
        except ValueError:
            self.reject(
                "generate_presigned_url",
                context,
                f"Unsupported operation: {operation}",
                message=f"Unsupported operation: {operation}",
            )
        return await self._call(
            "generate_presigned_url",
            context,
            self._storage.generate_presigned_url,
            presign_operation.client_method,
            params.bucket,
            params.key,
            params.expires_in,
        )

    # Helpers

    def reject(
        self,
        action: str,
        context: dict[str, Any],
        reason: str,
        message: str | None = None,
    ) -> NoReturn:
        """Records a validation failure and raises ParameterValidationError."""
        message = message or f"Invalid parameters for {action}: {reason}"
        self._errors.add_error(message, {**context, "error": reason})
        logger.error(message, extra={"action": action, "reason": reason})
        raise ParameterValidationError(
            message, context, errors=self._errors.get_all_errors()
        )

    def _validate(self, action: str, model: type[M], **params: Any) -> M:
        try:
            return model(**params)
        except ValidationError as e:
            self.reject(action, params, _describe(e))

    async def _call(
        self,
        action: str,
        context: dict[str, Any],
        func: Callable[..., T],
        *args: Any,
    ) -> OperationResult[T]:
        try:
            value = await asyncio.to_thread(func, *args)
        except StorageNotFoundError as e:
            return self._failure(action, ErrorKind.NOT_FOUND, context, str(e))
        except StorageError as e:
            return self._failure(action, ErrorKind.STORAGE, context, str(e))
        return OperationResult.success(value)

    async def _check_existence(
        self,
        action: str,
        context: dict[str, Any],
        head: Callable[[], None],
        mark: Callable[[bool], None],
    ) -> OperationResult[bool]:
        try:
            await asyncio.to_thread(head)
        except StorageNotFoundError:
            mark(False)
            return OperationResult.success(False)
        except StorageError as e:
            return self._failure(action, ErrorKind.STORAGE, context, str(e))
        mark(True)
        return OperationResult.success(True)

    def _failure(
        self,
        action: str,
        kind: ErrorKind,
        context: dict[str, Any],
        reason: str,
    ) -> OperationResult[Any]:
        message = f"{action} failed"
        details = {**context, "error": reason}
        self._errors.add_error(message, details)
        logger.error(message, extra={"action": action, "reason": reason})
        return OperationResult.failure(
            OperationError(kind=kind, message=message, context=details)
        )
