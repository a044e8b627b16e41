from .buckets import router as buckets_router
from .cache import router as cache_router
from .multipart import router as multipart_router
from .objects import router as objects_router
from .presign import router as presign_router

__all__ = [
    "buckets_router",
    "cache_router",
    "multipart_router",
    "objects_router",
    "presign_router",
]
