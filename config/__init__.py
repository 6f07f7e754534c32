"""Estimator configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
"""

from config.settings import settings, Settings
from config.errors import (
    ErrorCode,
    EstimatorError,
    ExportError,
    ItemNotFoundError,
    ValidationError,
)

__all__ = [
    "settings",
    "Settings",
    "ErrorCode",
    "EstimatorError",
    "ExportError",
    "ItemNotFoundError",
    "ValidationError",
]
