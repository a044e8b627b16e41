"""Object upload, download, listing, copy and deletion endpoints."""

from typing import Annotated

from fastapi import APIRouter, Form, UploadFile
from fastapi.responses import StreamingResponse

from storage_gateway.request_models import (
    CopyObjectRequest,
    DeleteObjectsRequest,
    ObjectRequest,
)
from storage_gateway.response_models import (
    ExistsResponse,
    FileListResponse,
    MessageResponse,
)
from storage_gateway.routes.results import GatewayDep, unwrap

router = APIRouter(tags=["objects"])


@router.post("/upload", response_model=MessageResponse)
async def upload_file(
    gateway: GatewayDep,
    bucket: Annotated[str | None, Form()] = None,
    key: Annotated[str | None, Form()] = None,
    file: UploadFile | None = None,
) -> MessageResponse:
    """Uploads the ``file`` form field to ``bucket``/``key``."""
    result = await gateway.upload_object(
        bucket,
        key,
        file.file if file is not None else None,
        file.content_type if file is not None else None,
    )
    unwrap(result, gateway, "Upload failed")
    return MessageResponse(message="File uploaded successfully")


@router.get("/file/exists", response_model=ExistsResponse)
async def file_exists(
    gateway: GatewayDep,
    bucket: str | None = None,
    key: str | None = None,
    fresh: bool = False,
) -> ExistsResponse:
    result = await gateway.object_exists(bucket, key, use_cache=not fresh)
    exists = unwrap(result, gateway, "File existence check failed")
    return ExistsResponse(exists=exists)


@router.get("/file")
async def get_file(
    gateway: GatewayDep,
    bucket: str | None = None,
    key: str | None = None,
) -> StreamingResponse:
    """Streams the object content back to the caller."""
    result = await gateway.get_object(bucket, key)
    stored = unwrap(
        result, gateway, "File not found or unreadable", not_found_status=404
    )
    headers = {}
    if stored.content_length is not None:
        headers["Content-Length"] = str(stored.content_length)
    return StreamingResponse(
        stored.body, media_type=stored.content_type, headers=headers
    )


@router.delete("/file", response_model=MessageResponse)
async def delete_file(body: ObjectRequest, gateway: GatewayDep) -> MessageResponse:
    result = await gateway.delete_object(body.bucket, body.key)
    unwrap(result, gateway, "Failed to delete file")
    return MessageResponse(message="File deleted")


@router.delete("/files", response_model=MessageResponse)
async def delete_files(
    body: DeleteObjectsRequest, gateway: GatewayDep
) -> MessageResponse:
    result = await gateway.delete_objects(body.bucket, body.keys)
    unwrap(result, gateway, "Failed to delete files")
    return MessageResponse(message="Files deleted successfully")


@router.get("/files", response_model=FileListResponse)
async def list_files(
    gateway: GatewayDep,
    bucket: str | None = None,
    prefix: str = "",
) -> FileListResponse:
    result = await gateway.list_objects(bucket, prefix)
    return FileListResponse(files=unwrap(result, gateway, "Failed to list files"))


@router.post("/file/copy", response_model=MessageResponse)
async def copy_file(body: CopyObjectRequest, gateway: GatewayDep) -> MessageResponse:
    result = await gateway.copy_object(
        body.source_bucket, body.source_key, body.dest_bucket, body.dest_key
    )
    unwrap(result, gateway, "Failed to copy file")
    return MessageResponse(
        message=(
            f'File copied from "{body.source_bucket}/{body.source_key}" '
            f'to "{body.dest_bucket}/{body.dest_key}"'
        )
    )
