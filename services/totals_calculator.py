"""Totals Calculator for the addition estimator.

Pure functions that turn a sequence of line items plus soft-cost ranges
into hard cost, A/E fee, contingency and all-in ranges. Every band (low,
mid, high) is computed independently.

Nothing here validates input: negative quantities, negative costs and
ranges with low > high are computed with as given.
"""

from typing import Iterable

from models.estimate_range import Range
from models.line_item import ApplyMode, LineItem
from models.totals import Totals


def hard_cost(items: Iterable[LineItem]) -> Range:
    """Sum quantity × unit cost over items, band by band.

    Items are accumulated in the order given.

    Args:
        items: Line items to aggregate.

    Returns:
        Hard-cost Range (zero for an empty sequence).
    """
    total = Range.zero()
    for item in items:
        total = total + item.cost()
    return total


def fee_base(
    hard: Range,
    permits: Range,
    other_allowances: Range,
    apply_mode: ApplyMode,
) -> Range:
    """Base that percentage soft costs are applied to.

    Args:
        hard: Hard-cost subtotal.
        permits: Permit allowance range.
        other_allowances: Other soft-cost allowance range.
        apply_mode: HARD_ONLY or HARD_PLUS_PERMITS_OTHERS.

    Returns:
        hard for HARD_ONLY, otherwise hard + permits + other_allowances.
    """
    if ApplyMode(apply_mode) is ApplyMode.HARD_ONLY:
        return hard
    return hard + permits + other_allowances


def _assemble(
    hard: Range,
    base: Range,
    ae_pct: Range,
    cont_pct: Range,
    permits: Range,
    other_allowances: Range,
) -> Totals:
    ae = ae_pct.percent_of(base)
    cont = cont_pct.percent_of(base)
    # permits/other are added once here whatever the fee base was
    all_in = hard + ae + cont + permits + other_allowances
    return Totals(hard=hard, ae=ae, cont=cont, all_in=all_in)


def compute_totals(
    items: Iterable[LineItem],
    ae_pct: Range,
    cont_pct: Range,
    permits: Range,
    other_allowances: Range,
) -> Totals:
    """Compute totals with percentage fees based on hard cost alone.

    Args:
        items: Line items (macro, trade-normalized, or merged).
        ae_pct: Architecture & engineering fee, in percent.
        cont_pct: Contingency, in percent.
        permits: Permit allowance in dollars.
        other_allowances: Other allowances in dollars.

    Returns:
        Totals with hard, ae, cont and all_in ranges.
    """
    hard = hard_cost(items)
    return _assemble(hard, hard, ae_pct, cont_pct, permits, other_allowances)


def compute_view_totals(
    items: Iterable[LineItem],
    ae_pct: Range,
    cont_pct: Range,
    permits: Range,
    other_allowances: Range,
    apply_mode: ApplyMode = ApplyMode.HARD_ONLY,
) -> Totals:
    """Compute totals honouring the apply mode for percentage fees.

    Under HARD_PLUS_PERMITS_OTHERS the A/E and contingency percentages are
    applied to hard + permits + other allowances. The all-in figure always
    adds hard cost, permits and other allowances exactly once.

    Returns:
        Totals for the headline view.
    """
    hard = hard_cost(items)
    base = fee_base(hard, permits, other_allowances, apply_mode)
    return _assemble(hard, base, ae_pct, cont_pct, permits, other_allowances)
