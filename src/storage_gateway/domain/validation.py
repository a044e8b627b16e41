"""Parameter models validated before any storage call."""

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, PositiveInt, StringConstraints

from storage_gateway.domain.models import UploadedPart


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Object keys may legally begin or end with whitespace, so they are kept verbatim.
Key = Annotated[str, StringConstraints(min_length=1), AfterValidator(_not_blank)]


class PresignOperation(str, Enum):
    """Operations a presigned URL may grant, mapped to SDK method names."""

    GET_OBJECT = "getObject"
    PUT_OBJECT = "putObject"

    @property
    def client_method(self) -> str:
        return {"getObject": "get_object", "putObject": "put_object"}[self.value]


class BucketParams(BaseModel):
    bucket: Name


class ObjectParams(BaseModel):
    bucket: Name
    key: Key


class UploadParams(ObjectParams):
    content_type: Name = "application/octet-stream"


class DeleteObjectsParams(BaseModel):
    bucket: Name
    keys: list[Key] = Field(min_length=1)


class ListObjectsParams(BaseModel):
    bucket: Name
    prefix: str = ""


class CopyParams(BaseModel):
    source_bucket: Name
    source_key: Key
    dest_bucket: Name
    dest_key: Key


class MultipartParams(ObjectParams):
    upload_id: Name


class UploadPartParams(MultipartParams):
    part_number: PositiveInt


class CompleteMultipartParams(MultipartParams):
    parts: list[UploadedPart] = Field(min_length=1)


class PresignParams(ObjectParams):
    expires_in: PositiveInt
