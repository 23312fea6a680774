"""API routers for the REST API."""

from elevations.web.routers.boms import router as boms_router
from elevations.web.routers.elevations import router as elevations_router
from elevations.web.routers.options import router as options_router

__all__ = [
    "boms_router",
    "elevations_router",
    "options_router",
]
