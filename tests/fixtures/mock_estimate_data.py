"""Mock estimate data fixtures for testing.

Small hand-checked item sets for the totals calculator and normalizer.
"""

from typing import List

from models.estimate_range import Range
from models.line_item import LineItem, TradeItem, UnitKind


# =============================================================================
# SINGLE ITEM (hand-checked: 100 sf @ 10/20/30)
# =============================================================================

def get_single_item() -> List[LineItem]:
    """One line item of 100 units at 10/20/30 per unit."""
    return [LineItem(key="t1", label="T1", sf=100, unit=Range(low=10, mid=20, high=30))]


# =============================================================================
# MACRO ITEMS
# =============================================================================

def get_macro_items() -> List[LineItem]:
    """Two macro areas, one of which shares a base key with a trade."""
    return [
        LineItem(key="conditioned", label="Conditioned Addition", sf=1000,
                 unit=Range(low=200, mid=250, high=300)),
        LineItem(key="porch", label="Rear Porch", sf=200,
                 unit=Range(low=40, mid=80, high=120)),
    ]


# =============================================================================
# TRADE ITEMS
# =============================================================================

def get_trade_items() -> List[TradeItem]:
    """Trades covering every unit kind; "porch" collides with a macro key."""
    return [
        TradeItem(key="windows", label="Impact Windows", qty=5, unit_kind=UnitKind.EA,
                  unit=Range(low=100, mid=200, high=300)),
        TradeItem(key="porch", label="Porch Railing", qty=40, unit_kind=UnitKind.LF,
                  unit=Range(low=50, mid=75, high=100)),
        TradeItem(key="roofing", label="Roofing", qty=1200, unit_kind=UnitKind.SF,
                  unit=Range(low=9, mid=13, high=18)),
        TradeItem(key="termite", label="Termite Treatment", qty=1, unit_kind=UnitKind.ALW,
                  unit=Range(low=1500, mid=2200, high=3500)),
    ]


def get_inverted_item() -> LineItem:
    """Unit-cost range with low > high (user-entered, not corrected)."""
    return LineItem(key="odd", label="Inverted", sf=10, unit=Range(low=30, mid=20, high=10))
