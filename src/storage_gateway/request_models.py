"""Request bodies for the storage gateway API.

Fields are optional here so that missing values reach the storage
operations, which validate and record them uniformly.
"""

from typing import Any

from storage_gateway.domain.models import CamelModel


class BucketRequest(CamelModel):
    bucket: str | None = None


class ObjectRequest(CamelModel):
    bucket: str | None = None
    key: str | None = None


class DeleteObjectsRequest(CamelModel):
    bucket: str | None = None
    keys: list[Any] | None = None


class CopyObjectRequest(CamelModel):
    source_bucket: str | None = None
    source_key: str | None = None
    dest_bucket: str | None = None
    dest_key: str | None = None


class MultipartRequest(ObjectRequest):
    upload_id: str | None = None


class UploadPartRequest(MultipartRequest):
    part_number: int | None = None
    body_base64: str | None = None


class CompleteMultipartRequest(MultipartRequest):
    parts: list[Any] | None = None
