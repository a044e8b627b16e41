"""Multipart upload orchestration endpoints."""

import base64
import binascii

from fastapi import APIRouter

from storage_gateway.domain import UploadedPart
from storage_gateway.domain.operations import StorageGateway
from storage_gateway.request_models import (
    CompleteMultipartRequest,
    MultipartRequest,
    ObjectRequest,
    UploadPartRequest,
)
from storage_gateway.response_models import MessageResponse, MultipartInitiateResponse
from storage_gateway.routes.results import GatewayDep, unwrap

router = APIRouter(prefix="/multipart", tags=["multipart"])


def _decode_part_body(gateway: StorageGateway, body: UploadPartRequest) -> bytes | None:
    if body.body_base64 is None:
        return None
    try:
        # Line-wrapped payloads are accepted; any other non-alphabet character is not.
        return base64.b64decode("".join(body.body_base64.split()), validate=True)
    except binascii.Error as e:
        gateway.reject(
            "upload_part",
            {
                "bucket": body.bucket,
                "key": body.key,
                "upload_id": body.upload_id,
                "part_number": body.part_number,
            },
            f"bodyBase64 is not valid base64: {e}",
        )


@router.post("/initiate", response_model=MultipartInitiateResponse)
async def initiate_upload(
    body: ObjectRequest, gateway: GatewayDep
) -> MultipartInitiateResponse:
    result = await gateway.initiate_multipart_upload(body.bucket, body.key)
    upload_id = unwrap(result, gateway, "Failed to initiate multipart upload")
    return MultipartInitiateResponse(upload_id=upload_id)


@router.post("/upload-part", response_model=UploadedPart)
async def upload_part(body: UploadPartRequest, gateway: GatewayDep) -> UploadedPart:
    """Uploads one base64-encoded part and returns its ETag and part number."""
    data = _decode_part_body(gateway, body)
    result = await gateway.upload_part(
        body.bucket, body.key, body.upload_id, body.part_number, data
    )
    return unwrap(result, gateway, "Failed to upload part")


@router.post("/complete", response_model=MessageResponse)
async def complete_upload(
    body: CompleteMultipartRequest, gateway: GatewayDep
) -> MessageResponse:
    result = await gateway.complete_multipart_upload(
        body.bucket, body.key, body.upload_id, body.parts
    )
    unwrap(result, gateway, "Failed to complete multipart upload")
    return MessageResponse(message="Multipart upload completed successfully")


@router.post("/abort", response_model=MessageResponse)
async def abort_upload(body: MultipartRequest, gateway: GatewayDep) -> MessageResponse:
    result = await gateway.abort_multipart_upload(body.bucket, body.key, body.upload_id)
    unwrap(result, gateway, "Failed to abort multipart upload")
    return MessageResponse(
        message=f'Multipart upload aborted for "{body.bucket}/{body.key}"'
    )
