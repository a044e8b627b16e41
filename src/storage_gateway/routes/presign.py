"""Presigned URL endpoint."""

from typing import Annotated

from fastapi import APIRouter, Query

from storage_gateway.response_models import PresignResponse
from storage_gateway.routes.results import GatewayDep, unwrap

router = APIRouter(tags=["presign"])


@router.get("/presign", response_model=PresignResponse)
async def presign(
    gateway: GatewayDep,
    bucket: str | None = None,
    key: str | None = None,
    op: str = "getObject",
    expires_in: Annotated[int | None, Query(alias="expiresIn")] = None,
) -> PresignResponse:
    """
    Returns a presigned URL for ``getObject`` or ``putObject`` on one object.

    ``expiresIn`` defaults to the configured lifetime.
    """
    result = await gateway.generate_presigned_url(bucket, key, op, expires_in)
    return PresignResponse(url=unwrap(result, gateway, "Failed to generate presigned URL"))
