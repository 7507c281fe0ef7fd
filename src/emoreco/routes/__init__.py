"""HTTP route exports."""

from .analysis import index_router
from .analysis import router as analysis_router

__all__ = ["analysis_router", "index_router"]
