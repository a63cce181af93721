"""API routers."""

from app.routers.candidatura import router as candidatura_router
from app.routers.contacto import router as contacto_router

__all__ = ["candidatura_router", "contacto_router"]
