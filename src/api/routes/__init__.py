"""API route modules."""

from .grid import router as grid_router
from .health import router as health_router

__all__ = ["health_router", "grid_router"]
