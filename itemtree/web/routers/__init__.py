from .items import router as items_router
from .keywords import router as keywords_router
from .system import router as system_router

__all__ = [
    "items_router",
    "keywords_router",
    "system_router",
]
