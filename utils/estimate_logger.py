"""Estimate Summary Logger.

Provides highly visible, formatted console output for estimate totals
with banner markers, alongside structured structlog events.
"""

from datetime import datetime
from typing import Optional

import structlog

from models.estimate_range import BANDS, Range
from models.line_item import ApplyMode
from models.totals import Totals
from utils.formatting import format_currency

logger = structlog.get_logger()

# Visual markers
BANNER_WIDTH = 80
SUMMARY_BANNER_CHAR = "═"
EXPORT_BANNER_CHAR = "─"
LABEL_WIDTH = 34
COLUMN_WIDTH = 14


def _create_banner(char: str, text: str, width: int = BANNER_WIDTH) -> str:
    """Create a centered banner with given character."""
    text_with_spaces = f" {text} "
    padding = (width - len(text_with_spaces)) // 2
    return char * padding + text_with_spaces + char * (width - padding - len(text_with_spaces))


def _format_row(label: str, values: Range) -> str:
    cells = "".join(f"{format_currency(values.band(b)):>{COLUMN_WIDTH}}" for b in BANDS)
    return f"║ {label:<{LABEL_WIDTH}}{cells}"


def format_summary_lines(
    totals: Totals,
    permits: Range,
    other_allowances: Range,
    apply_mode: ApplyMode,
    title: str = "ESTIMATE SUMMARY",
) -> list:
    """Build the banner summary as a list of lines (no printing)."""
    header = "".join(f"{band.upper():>{COLUMN_WIDTH}}" for band in BANDS)
    return [
        SUMMARY_BANNER_CHAR * BANNER_WIDTH,
        _create_banner(SUMMARY_BANNER_CHAR, title.upper()),
        SUMMARY_BANNER_CHAR * BANNER_WIDTH,
        f"║ {'Fee base: ' + apply_mode.label:<{LABEL_WIDTH}}{header}",
        _format_row("Hard cost subtotal", totals.hard),
        _format_row("Architecture & Engineering", totals.ae),
        _format_row("Contingency", totals.cont),
        _format_row("Permits & Plan Review", permits),
        _format_row("Other Soft Costs & Allowances", other_allowances),
        SUMMARY_BANNER_CHAR * BANNER_WIDTH,
        _format_row("ALL-IN ESTIMATE", totals.all_in),
        SUMMARY_BANNER_CHAR * BANNER_WIDTH,
    ]


def log_estimate_summary(
    totals: Totals,
    permits: Range,
    other_allowances: Range,
    apply_mode: ApplyMode,
    title: str = "ESTIMATE SUMMARY",
) -> None:
    """Print the totals table with a banner and log it structured."""
    print("\n")
    for line in format_summary_lines(totals, permits, other_allowances, apply_mode, title):
        print(line)
    print("\n")

    # Also log structured for log aggregation systems
    logger.info(
        "estimate_summary_logged",
        apply_mode=apply_mode.value,
        hard=totals.hard.to_dict(),
        all_in=totals.all_in.to_dict(),
    )


def log_export_complete(path: str, row_count: int, timestamp: Optional[str] = None) -> None:
    """Log a finished CSV export."""
    timestamp = timestamp or datetime.now().isoformat(timespec="seconds")

    print(EXPORT_BANNER_CHAR * BANNER_WIDTH)
    print(_create_banner(EXPORT_BANNER_CHAR, "✓ CSV EXPORT WRITTEN"))
    print(f"║ Path      : {path}")
    print(f"║ Rows      : {row_count:,}")
    print(f"║ Timestamp : {timestamp}")
    print(EXPORT_BANNER_CHAR * BANNER_WIDTH)

    logger.info("export_complete_logged", path=path, row_count=row_count)


def log_export_failed(path: str, error: str) -> None:
    """Log a failed CSV export."""
    print("!" * BANNER_WIDTH)
    print(_create_banner("!", "✗ CSV EXPORT FAILED"))
    print(f"║ Path  : {path}")
    print(f"║ Error : {error}")
    print("!" * BANNER_WIDTH)

    logger.error("export_failed_logged", path=path, error=error)
