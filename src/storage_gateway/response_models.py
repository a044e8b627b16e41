"""Response models for the storage gateway API."""

from typing import Any

from pydantic import BaseModel

from storage_gateway.domain import BucketInfo, ErrorRecord, ObjectInfo
from storage_gateway.domain.models import CamelModel


class MessageResponse(BaseModel):
    """Acknowledges an operation without a payload."""

    success: bool = True
    message: str


class BucketListResponse(MessageResponse):
    buckets: list[BucketInfo]


class ExistsResponse(BaseModel):
    success: bool = True
    message: str | None = None
    exists: bool


class FileListResponse(BaseModel):
    success: bool = True
    files: list[ObjectInfo]


class MultipartInitiateResponse(CamelModel):
    upload_id: str


class PresignResponse(BaseModel):
    success: bool = True
    url: str


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    success: bool = False
    message: str
    errors: list[ErrorRecord] = []
    error: Any = None
