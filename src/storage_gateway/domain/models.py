from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BucketInfo(CamelModel, frozen=True):
    name: str
    creation_date: datetime | None = None


class ObjectInfo(CamelModel, frozen=True):
    key: str
    size: int = 0
    last_modified: datetime | None = None
    etag: str | None = Field(default=None, alias="ETag")


class StoredObject(BaseModel):
    """Object body as a chunk iterator plus the headers needed to stream it."""

    body: Any
    content_type: str = "application/octet-stream"
    content_length: int | None = None


class UploadedPart(BaseModel, frozen=True):
    """Identifies one uploaded part of a multipart upload."""

    model_config = ConfigDict(populate_by_name=True)

    etag: str = Field(alias="ETag", min_length=1)
    part_number: int = Field(alias="PartNumber", ge=1)


class DeletionFailure(BaseModel, frozen=True):
    key: str
    code: str | None = None
    message: str | None = None


class DeleteObjectsOutcome(BaseModel, frozen=True):
    """Per-key result of a batch delete."""

    deleted: list[str] = Field(default_factory=list)
    failed: list[DeletionFailure] = Field(default_factory=list)
