"""boto3 implementation of the StorageClient interface."""

import logging
from typing import BinaryIO

import boto3
from botocore.client import BaseClient
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    ReadTimeoutError,
)

from storage_gateway.config import S3Config
from storage_gateway.domain.models import (
    BucketInfo,
    DeleteObjectsOutcome,
    DeletionFailure,
    ObjectInfo,
    StoredObject,
    UploadedPart,
)
from storage_gateway.exceptions import (
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageUnavailableError,
)
from storage_gateway.interfaces import StorageClient

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"404", "NotFound", "NoSuchKey", "NoSuchBucket", "NoSuchUpload"}
PERMISSION_CODES = {
    "403",
    "AccessDenied",
    "InvalidAccessKeyId",
    "SignatureDoesNotMatch",
}
UNAVAILABLE_CODES = {"SlowDown", "RequestTimeout", "ServiceUnavailable", "503"}

# DeleteObjects accepts at most this many keys per request.
DELETE_BATCH_SIZE = 1000
STREAM_CHUNK_SIZE = 64 * 1024


def create_s3_client(config: S3Config) -> BaseClient:
    """
    Builds the boto3 S3 client from configuration.

    Retries and timeouts are owned by the SDK client configuration.
    """
    return boto3.client(
        "s3",
        region_name=config.region,
        aws_access_key_id=config.access_key_id or None,
        aws_secret_access_key=config.secret_access_key or None,
        endpoint_url=config.endpoint_url,
        config=Config(
            signature_version="s3v4",
            retries={"total_max_attempts": config.max_attempts, "mode": "standard"},
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        ),
    )


class S3Storage(StorageClient):
    """Handles object storage operations using an S3 client."""

    def __init__(self, client: BaseClient):
        self._client = client

    def create_bucket(self, bucket_name: str) -> None:
        params = {"Bucket": bucket_name}
        # us-east-1 rejects an explicit LocationConstraint.
        region = self._client.meta.region_name
        if region and region != "us-east-1":
            params["CreateBucketConfiguration"] = {"LocationConstraint": region}
        try:
            self._client.create_bucket(**params)
        except Exception as e:
            raise self._map_error(e, "create_bucket", bucket_name) from e
        logger.info("Bucket created", extra={"bucket": bucket_name})

    def delete_bucket(self, bucket_name: str) -> None:
        try:
            self._client.delete_bucket(Bucket=bucket_name)
        except Exception as e:
            raise self._map_error(e, "delete_bucket", bucket_name) from e
        logger.info("Bucket deleted", extra={"bucket": bucket_name})

    def list_buckets(self) -> list[BucketInfo]:
        try:
            response = self._client.list_buckets()
        except Exception as e:
            raise self._map_error(e, "list_buckets", "*") from e
        return [
            BucketInfo(name=b["Name"], creation_date=b.get("CreationDate"))
            for b in response.get("Buckets") or []
        ]

    def head_bucket(self, bucket_name: str) -> None:
        try:
            self._client.head_bucket(Bucket=bucket_name)
        except Exception as e:
            raise self._map_error(e, "head_bucket", bucket_name) from e

    def put_object(
        self,
        bucket_name: str,
        object_name: str,
        data: bytes | BinaryIO,
        content_type: str,
    ) -> None:
        try:
            if isinstance(data, (bytes, bytearray, memoryview)):
                self._client.put_object(
                    Bucket=bucket_name,
                    Key=object_name,
                    Body=data,
                    ContentType=content_type,
                )
            else:
                self._client.upload_fileobj(
                    Fileobj=data,
                    Bucket=bucket_name,
                    Key=object_name,
                    ExtraArgs={"ContentType": content_type},
                )
        except Exception as e:
            raise self._map_error(
                e, "put_object", f"{bucket_name}/{object_name}"
            ) from e
        logger.info(
            "Object uploaded",
            extra={"bucket": bucket_name, "object": object_name},
        )

    def head_object(self, bucket_name: str, object_name: str) -> None:
        try:
            self._client.head_object(Bucket=bucket_name, Key=object_name)
        except Exception as e:
            raise self._map_error(
                e, "head_object", f"{bucket_name}/{object_name}"
            ) from e

    def delete_object(self, bucket_name: str, object_name: str) -> None:
        try:
            self._client.delete_object(Bucket=bucket_name, Key=object_name)
        except Exception as e:
            raise self._map_error(
                e, "delete_object", f"{bucket_name}/{object_name}"
            ) from e
        logger.info(
            "Object deleted",
            extra={"bucket": bucket_name, "object": object_name},
        )

    def delete_objects(
        self, bucket_name: str, object_names: list[str]
    ) -> DeleteObjectsOutcome:
        deleted: list[str] = []
        failed: list[DeletionFailure] = []
        for start in range(0, len(object_names), DELETE_BATCH_SIZE):
            batch = object_names[start : start + DELETE_BATCH_SIZE]
            try:
                response = self._client.delete_objects(
                    Bucket=bucket_name,
                    Delete={"Objects": [{"Key": k} for k in batch], "Quiet": False},
                )
            except Exception as e:
                raise self._map_error(e, "delete_objects", bucket_name) from e
            deleted.extend(d["Key"] for d in response.get("Deleted") or [])
            failed.extend(
                DeletionFailure(
                    key=err["Key"], code=err.get("Code"), message=err.get("Message")
                )
                for err in response.get("Errors") or []
            )
        logger.info(
            "Objects deleted",
            extra={
                "bucket": bucket_name,
                "deleted": len(deleted),
                "failed": len(failed),
            },
        )
        return DeleteObjectsOutcome(deleted=deleted, failed=failed)

    def list_objects(self, bucket_name: str, prefix: str = "") -> list[ObjectInfo]:
        objects: list[ObjectInfo] = []
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=bucket_name, Prefix=prefix):
                objects.extend(
                    ObjectInfo(
                        key=item["Key"],
                        size=item.get("Size", 0),
                        last_modified=item.get("LastModified"),
                        etag=item.get("ETag"),
                    )
                    for item in page.get("Contents") or []
                )
        except Exception as e:
            raise self._map_error(e, "list_objects", bucket_name) from e
        return objects

    def get_object(self, bucket_name: str, object_name: str) -> StoredObject:
        try:
            response = self._client.get_object(Bucket=bucket_name, Key=object_name)
        except Exception as e:
            raise self._map_error(
                e, "get_object", f"{bucket_name}/{object_name}"
            ) from e
        body = response["Body"]
        logger.info(
            "Object opened for download",
            extra={"bucket": bucket_name, "object": object_name},
        )
        return StoredObject(
            body=self._iter_body(body),
            content_type=response.get("ContentType") or "application/octet-stream",
            content_length=response.get("ContentLength"),
        )

    def copy_object(
        self,
        source_bucket: str,
        source_key: str,
        dest_bucket: str,
        dest_key: str,
    ) -> None:
        try:
            self._client.copy_object(
                CopySource={"Bucket": source_bucket, "Key": source_key},
                Bucket=dest_bucket,
                Key=dest_key,
            )
        except Exception as e:
            raise self._map_error(
                e, "copy_object", f"{source_bucket}/{source_key}"
            ) from e
        logger.info(
            "Object copied",
            extra={
                "from": f"{source_bucket}/{source_key}",
                "to": f"{dest_bucket}/{dest_key}",
            },
        )

    def create_multipart_upload(self, bucket_name: str, object_name: str) -> str:
        try:
            response = self._client.create_multipart_upload(
                Bucket=bucket_name, Key=object_name
            )
        except Exception as e:
            raise self._map_error(
                e, "create_multipart_upload", f"{bucket_name}/{object_name}"
            ) from e
        upload_id = response["UploadId"]
        logger.info(
            "Multipart upload initiated",
            extra={
                "bucket": bucket_name,
                "object": object_name,
                "upload_id": upload_id,
            },
        )
        return upload_id

    def upload_part(
        self,
        bucket_name: str,
        object_name: str,
        upload_id: str,
        part_number: int,
        data: bytes,
    ) -> UploadedPart:
        try:
            response = self._client.upload_part(
                Bucket=bucket_name,
                Key=object_name,
                UploadId=upload_id,
                PartNumber=part_number,
                Body=data,
            )
        except Exception as e:
            raise self._map_error(e, "upload_part", upload_id) from e
        return UploadedPart(etag=response["ETag"], part_number=part_number)

    def complete_multipart_upload(
        self,
        bucket_name: str,
        object_name: str,
        upload_id: str,
        parts: list[UploadedPart],
    ) -> None:
        try:
            self._client.complete_multipart_upload(
                Bucket=bucket_name,
                Key=object_name,
                UploadId=upload_id,
                MultipartUpload={
                    "Parts": [part.model_dump(by_alias=True) for part in parts]
                },
            )
        except Exception as e:
            raise self._map_error(e, "complete_multipart_upload", upload_id) from e
        logger.info(
            "Multipart upload completed",
            extra={
                "bucket": bucket_name,
                "object": object_name,
                "parts": len(parts),
            },
        )

    def abort_multipart_upload(
        self, bucket_name: str, object_name: str, upload_id: str
    ) -> None:
        try:
            self._client.abort_multipart_upload(
                Bucket=bucket_name, Key=object_name, UploadId=upload_id
            )
        except Exception as e:
            raise self._map_error(e, "abort_multipart_upload", upload_id) from e
        logger.info(
            "Multipart upload aborted",
            extra={
                "bucket": bucket_name,
                "object": object_name,
                "upload_id": upload_id,
            },
        )

    def generate_presigned_url(
        self,
        client_method: str,
        bucket_name: str,
        object_name: str,
        expires_in: int,
    ) -> str:
        try:
            url = self._client.generate_presigned_url(
                ClientMethod=client_method,
                Params={"Bucket": bucket_name, "Key": object_name},
                ExpiresIn=expires_in,
            )
        except Exception as e:
            raise self._map_error(
                e, "generate_presigned_url", f"{bucket_name}/{object_name}"
            ) from e
        return str(url)

    @staticmethod
    def _iter_body(body):
        try:
            yield from body.iter_chunks(chunk_size=STREAM_CHUNK_SIZE)
        finally:
            body.close()

    @staticmethod
    def _map_error(exc: Exception, action: str, resource: str) -> StorageError:
        """Translates an SDK exception into a StorageError."""
        if isinstance(
            exc, (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)
        ):
            logger.warning(
                "Storage unavailable", extra={"action": action, "resource": resource}
            )
            return StorageUnavailableError(f"Storage unavailable during {action}", exc)

        if isinstance(exc, NoCredentialsError):
            return StoragePermissionError("No storage credentials configured", exc)

        if isinstance(exc, ClientError):
            error = exc.response.get("Error") or {}
            code = str(error.get("Code") or "")
            message = error.get("Message") or str(exc)

            if code in NOT_FOUND_CODES:
                return StorageNotFoundError(resource, exc)
            if code in PERMISSION_CODES:
                return StoragePermissionError(message, exc)
            if code in UNAVAILABLE_CODES:
                return StorageUnavailableError(message, exc)

            logger.error(
                "Storage client error",
                extra={"action": action, "resource": resource, "code": code},
            )
            return StorageError(message, exc)

        if isinstance(exc, BotoCoreError):
            logger.error(
                "Storage SDK error", extra={"action": action, "resource": resource}
            )
            return StorageError(str(exc), exc)

        logger.exception(
            "Storage call failed", extra={"action": action, "resource": resource}
        )
        return StorageError(f"Storage call failed during {action}: {exc}", exc)
