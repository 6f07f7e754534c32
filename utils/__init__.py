"""Utility modules for the addition estimator."""

from utils.estimate_logger import (
    format_summary_lines,
    log_estimate_summary,
    log_export_complete,
    log_export_failed,
)
from utils.formatting import format_currency

__all__ = [
    "format_summary_lines",
    "log_estimate_summary",
    "log_export_complete",
    "log_export_failed",
    "format_currency",
]
