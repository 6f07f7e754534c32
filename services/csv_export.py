"""CSV export of an estimate.

One row per macro item and per trade item, followed by summary rows for
the hard-cost subtotal, A/E, contingency, permits, other allowances and
the all-in estimate. Summary rows are padded so the three cost bands
always sit in the last three columns.
"""

import csv
import io
from datetime import date
from pathlib import Path
from typing import Any, List, Optional, Sequence

import structlog

from config.errors import ExportError
from models.estimate_range import Range
from services.project_state import EstimateProject

logger = structlog.get_logger(__name__)


HEADER = [
    "Scope",
    "Quantity",
    "Unit",
    "Unit $ (Low)",
    "Unit $ (Mid)",
    "Unit $ (High)",
    "Cost (Low)",
    "Cost (Mid)",
    "Cost (High)",
]

MACRO_UNIT_LABEL = "$ / sf"


def _cell(value: Any) -> Any:
    """Whole-number floats are written without a trailing ".0"."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _item_row(label: str, quantity: float, unit_label: str, unit: Range) -> List[Any]:
    cost = unit * quantity
    values = [quantity, unit_label, unit.low, unit.mid, unit.high, cost.low, cost.mid, cost.high]
    return [label, *(_cell(v) for v in values)]


def _summary_row(label: str, values: Range, quantity: Any = "") -> List[Any]:
    return [label, _cell(quantity), "", "", "", "", _cell(values.low), _cell(values.mid), _cell(values.high)]


def build_rows(project: EstimateProject) -> List[List[Any]]:
    """Build every export row (header included) for the project's current state."""
    merged = project.merged_totals
    view = project.view_totals

    rows: List[List[Any]] = [list(HEADER)]
    rows.extend(
        _item_row(item.label, item.sf, MACRO_UNIT_LABEL, item.unit) for item in project.items
    )
    rows.extend(
        _item_row(trade.label, trade.qty, trade.unit_kind.value, trade.unit)
        for trade in project.trades
    )
    rows.append(_summary_row("HARD COST SUBTOTAL", merged.hard, quantity=project.total_quantity))
    rows.append([f"A/E Base: {project.apply_mode.label}"])
    rows.append(_summary_row("Architecture & Engineering ($)", view.ae))
    rows.append(_summary_row("Contingency ($)", view.cont))
    rows.append(_summary_row("Permits & Plan Review (allowance)", project.permits))
    rows.append(_summary_row("Other Soft Costs & Allowances", project.other_allowances))
    rows.append(_summary_row("ALL-IN ESTIMATE", view.all_in))
    return rows


def render_csv(rows: Sequence[Sequence[Any]]) -> str:
    """Serialize rows as CSV text with newline-separated records."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def export_filename(prefix: str, day: Optional[date] = None) -> str:
    """File name for an export made on day (defaults to today)."""
    day = day or date.today()
    return f"{prefix}-{day.isoformat()}.csv"


def write_csv(
    project: EstimateProject,
    out_dir: str,
    prefix: str,
    day: Optional[date] = None,
) -> Path:
    """Write the project's CSV export into out_dir.

    Args:
        project: Project to export.
        out_dir: Directory for the file (created if missing).
        prefix: File name prefix.
        day: Date stamped into the file name (defaults to today).

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the directory or file cannot be written.
    """
    rows = build_rows(project)
    path = Path(out_dir) / export_filename(prefix, day)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_csv(rows), encoding="utf-8")
    except OSError as e:
        logger.error("csv_export_failed", path=str(path), error=str(e))
        raise ExportError(f"Could not write CSV export: {e}", path=str(path)) from e

    logger.info("csv_exported", path=str(path), rows=len(rows))
    return path
