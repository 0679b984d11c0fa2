from riftbuilder.api.compare import router as compare_router
from riftbuilder.api.health import router as health_router

__all__ = [
    "compare_router",
    "health_router",
]
