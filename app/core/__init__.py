"""Core application components."""

from app.core.config import Settings, get_settings
from app.core.exceptions import (
    ApplicationError,
    ConfigurationError,
    DeliveryError,
    ValidationError,
    ValidationReason,
)

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "DeliveryError",
    "Settings",
    "ValidationError",
    "ValidationReason",
    "get_settings",
]
