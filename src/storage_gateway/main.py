"""FastAPI application entry point."""

import uvicorn
from fastapi import FastAPI

from storage_gateway.dependencies import get_config
from storage_gateway.exception_handlers import register_exception_handlers
from storage_gateway.routes import (
    buckets_router,
    cache_router,
    multipart_router,
    objects_router,
    presign_router,
)

_config = get_config()

app = FastAPI(title="Storage Gateway")
register_exception_handlers(app)
for router in (
    buckets_router,
    objects_router,
    multipart_router,
    presign_router,
    cache_router,
):
    app.include_router(router, prefix=_config.api_prefix)


def run() -> None:
    """Serves the application with uvicorn, keeping the JSON log handlers."""
    uvicorn.run(app, host="0.0.0.0", port=_config.port, log_config=None)
