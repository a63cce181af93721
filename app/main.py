"""Mantagua Gastronomía website forms - application and contact email relay."""

import logging
import os

from fastapi import FastAPI

from app.core.exceptions import ConfigurationError
from app.core.responses import configuration_error_handler, server_error_handler
from app.routers import candidatura_router, contacto_router

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Mantagua Forms",
    description="Relays website job applications and contact messages by email",
    version="1.0.0",
)

# CORS headers are set per response; see app.core.responses
app.add_exception_handler(ConfigurationError, configuration_error_handler)
app.add_exception_handler(Exception, server_error_handler)

app.include_router(candidatura_router)
app.include_router(contacto_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "mantagua-forms"}
