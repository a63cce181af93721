"""Utility functions and classes."""

from app.utils.sanitizer import escape_html
from app.utils.validators import (
    ValidationResult,
    validate_application,
    validate_contact,
)

__all__ = ["ValidationResult", "escape_html", "validate_application", "validate_contact"]
