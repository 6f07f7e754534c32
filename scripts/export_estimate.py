"""
Export the seeded addition estimate to CSV and print a totals summary.

Usage:
  python scripts/export_estimate.py
  python scripts/export_estimate.py --apply-mode HARD_PLUS_PERMITS_OTHERS --out-dir exports
  python scripts/export_estimate.py --summary-only
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Allow running as a plain script from the repository root.
PROJECT_ROOT = str(Path(__file__).resolve().parents[1])
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import structlog  # noqa: E402

from config.errors import EstimatorError, ExportError  # noqa: E402
from config.settings import Settings  # noqa: E402
from models.line_item import ApplyMode  # noqa: E402
from services.csv_export import build_rows, write_csv  # noqa: E402
from services.project_state import EstimateProject  # noqa: E402
from utils.estimate_logger import (  # noqa: E402
    log_estimate_summary,
    log_export_complete,
    log_export_failed,
)

logger = structlog.get_logger()


def _configure_logging(log_level: str) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Export the addition estimate to CSV")
    parser.add_argument(
        "--apply-mode",
        required=False,
        type=str.upper,
        choices=[mode.value for mode in ApplyMode],
        help="Base for A/E and contingency percentages (defaults to ESTIMATE_APPLY_MODE)",
    )
    parser.add_argument("--out-dir", required=False, help="Output directory (defaults to ESTIMATE_EXPORT_DIR)")
    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Print the totals summary without writing a CSV file",
    )
    args = parser.parse_args(argv)

    config = Settings()
    _configure_logging(config.log_level)

    try:
        project = EstimateProject.from_seed(config)
        if args.apply_mode:
            project.set_apply_mode(args.apply_mode)
    except (ValueError, EstimatorError) as e:
        logger.error("project_setup_failed", error=str(e))
        print(str(e))
        return 2

    log_estimate_summary(
        project.view_totals,
        project.permits,
        project.other_allowances,
        project.apply_mode,
        title=project.name or "ESTIMATE SUMMARY",
    )

    if args.summary_only:
        return 0

    out_dir = args.out_dir or config.export_dir
    try:
        path = write_csv(project, out_dir, config.export_prefix)
    except ExportError as e:
        log_export_failed(e.path, e.message)
        return 3

    log_export_complete(str(path), len(build_rows(project)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
