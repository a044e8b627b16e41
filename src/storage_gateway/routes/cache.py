"""Existence cache administration endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from storage_gateway.dependencies import get_existence_cache
from storage_gateway.domain import ExistenceCache
from storage_gateway.response_models import MessageResponse

router = APIRouter(tags=["cache"])


@router.delete("/cache", response_model=MessageResponse)
async def clear_cache(
    cache: Annotated[ExistenceCache, Depends(get_existence_cache)],
) -> MessageResponse:
    """Forgets every cached existence answer, e.g. after out-of-band writes."""
    cleared = len(cache)
    cache.clear()
    return MessageResponse(message=f"Existence cache cleared ({cleared} entries)")
