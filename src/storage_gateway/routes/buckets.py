"""Bucket lifecycle endpoints."""

from fastapi import APIRouter

from storage_gateway.request_models import BucketRequest
from storage_gateway.response_models import (
    BucketListResponse,
    ExistsResponse,
    MessageResponse,
)
from storage_gateway.routes.results import GatewayDep, unwrap

router = APIRouter(tags=["buckets"])


@router.post("/bucket", response_model=MessageResponse)
async def create_bucket(body: BucketRequest, gateway: GatewayDep) -> MessageResponse:
    result = await gateway.create_bucket(body.bucket)
    unwrap(result, gateway, "Bucket creation failed")
    return MessageResponse(message="Bucket created")


@router.get("/buckets", response_model=BucketListResponse)
async def list_buckets(gateway: GatewayDep) -> BucketListResponse:
    buckets = unwrap(await gateway.list_buckets(), gateway, "Failed to list buckets")
    return BucketListResponse(message="Buckets fetched successfully", buckets=buckets)


@router.get("/bucket/exists", response_model=ExistsResponse)
async def bucket_exists(
    gateway: GatewayDep,
    bucket: str | None = None,
    fresh: bool = False,
) -> ExistsResponse:
    """Checks bucket existence; ``fresh=true`` bypasses the existence cache."""
    result = await gateway.bucket_exists(bucket, use_cache=not fresh)
    exists = unwrap(result, gateway, "Bucket existence check failed")
    return ExistsResponse(
        message=f"Bucket {'exists' if exists else 'does not exist'}",
        exists=exists,
    )


@router.delete("/bucket", response_model=MessageResponse)
async def delete_bucket(body: BucketRequest, gateway: GatewayDep) -> MessageResponse:
    result = await gateway.delete_bucket(body.bucket)
    unwrap(result, gateway, "Bucket deletion failed")
    return MessageResponse(message="Bucket deleted")
