"""Session seed data for the Jacksonville, FL residential addition.

Every session starts from these values; edits only ever change field
values on the objects built here.
"""

from typing import Any, Dict, List

from models.estimate_range import Range
from models.line_item import LineItem, TradeItem, UnitKind


# =============================================================================
# MACRO AREAS
# =============================================================================


MACRO_ITEM_SEEDS: List[Dict[str, Any]] = [
    {"key": "conditioned", "label": "Conditioned Addition", "sf": 7029,
     "unit": {"low": 260, "mid": 300, "high": 340}},
    {"key": "garage", "label": "Garage(s)", "sf": 711,
     "unit": {"low": 35, "mid": 47.5, "high": 60}},
    {"key": "carport", "label": "Carport", "sf": 764,
     "unit": {"low": 20, "mid": 40, "high": 60}},
    {"key": "porch", "label": "Rear Porch", "sf": 1521,
     "unit": {"low": 40, "mid": 80, "high": 120}},
    {"key": "balconies", "label": "Balconies", "sf": 190,
     "unit": {"low": 40, "mid": 80, "high": 120}},
]

# Macro key excluded from the roof coverage approximation
ROOF_EXCLUDED_KEY = "garage"


# =============================================================================
# FLORIDA / JACKSONVILLE TRADE BREAKDOWN
# =============================================================================

# "qty" is either a number or the name of a quantity derived from macro areas
# (see derived_quantities).
TRADE_ITEM_SEEDS: List[Dict[str, Any]] = [
    {"key": "impactWindows", "label": "Impact-Rated Windows", "qty": 30, "unit_kind": UnitKind.EA,
     "unit": {"low": 1400, "mid": 2200, "high": 3200}},
    {"key": "extDoors", "label": "Impact Exterior Doors", "qty": 6, "unit_kind": UnitKind.EA,
     "unit": {"low": 1800, "mid": 2600, "high": 4000}},
    {"key": "garageDoors", "label": "Impact Garage Doors", "qty": 2, "unit_kind": UnitKind.EA,
     "unit": {"low": 2500, "mid": 4500, "high": 6500}},
    {"key": "roofing", "label": "Roofing (wind-uplift rated)", "qty": "roof_cover_sf", "unit_kind": UnitKind.SF,
     "unit": {"low": 9, "mid": 13, "high": 18}},
    {"key": "framing", "label": "Structural Framing & Sheathing (allowance)", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 180000, "mid": 240000, "high": 320000}},
    {"key": "stucco", "label": "Exterior Stucco/Cladding (allowance)", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 35000, "mid": 55000, "high": 90000}},
    {"key": "insulation", "label": "Insulation incl. attic baffles", "qty": "conditioned_sf", "unit_kind": UnitKind.SF,
     "unit": {"low": 2.5, "mid": 3.5, "high": 4.5}},
    {"key": "drywallPaint", "label": "Drywall + Prime/Paint", "qty": "conditioned_sf", "unit_kind": UnitKind.SF,
     "unit": {"low": 6, "mid": 8, "high": 11}},
    {"key": "flooring", "label": "Flooring (material+install)", "qty": "conditioned_sf", "unit_kind": UnitKind.SF,
     "unit": {"low": 6, "mid": 9, "high": 14}},
    {"key": "cabsTops", "label": "Cabinetry & Tops (allowance)", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 35000, "mid": 60000, "high": 90000}},
    {"key": "hvac", "label": "HVAC Systems (equip+ducts)", "qty": 2, "unit_kind": UnitKind.EA,
     "unit": {"low": 11000, "mid": 16000, "high": 22000}},
    {"key": "plumbing", "label": "Plumbing Rough + Fixtures (allowance)", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 50000, "mid": 80000, "high": 120000}},
    {"key": "electrical", "label": "Electrical Rough + Fixtures (allowance)", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 45000, "mid": 75000, "high": 110000}},
    {"key": "waterproofing", "label": "Balcony/Deck Waterproofing", "qty": "balcony_sf", "unit_kind": UnitKind.SF,
     "unit": {"low": 12, "mid": 20, "high": 30}},
    {"key": "hurricane", "label": "Hurricane Straps & Hold-downs (allowance)", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 8000, "mid": 12000, "high": 18000}},
    {"key": "termite", "label": "Termite Treatment & Soil Poison", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 1500, "mid": 2200, "high": 3500}},
    {"key": "dumpsters", "label": "Dumpsters / Cleanup (allowance)", "qty": 1, "unit_kind": UnitKind.ALW,
     "unit": {"low": 8000, "mid": 12000, "high": 16000}},
]


# =============================================================================
# SOFT COSTS
# =============================================================================


SOFT_COST_SEEDS: Dict[str, Dict[str, float]] = {
    "ae_pct": {"low": 10, "mid": 12.5, "high": 15},
    "cont_pct": {"low": 10, "mid": 12.5, "high": 15},
    "permits": {"low": 2500, "mid": 4000, "high": 10000},
    "other_allowances": {"low": 80000, "mid": 100000, "high": 150000},
}


def default_macro_items() -> List[LineItem]:
    """Fresh macro line items built from MACRO_ITEM_SEEDS."""
    return [LineItem.model_validate(seed) for seed in MACRO_ITEM_SEEDS]


def roof_cover_sf(macro_items: List[LineItem]) -> float:
    """Approximate roof coverage: every macro area except the garage."""
    return sum(item.sf for item in macro_items if item.key != ROOF_EXCLUDED_KEY)


def _quantity_of(macro_items: List[LineItem], key: str) -> float:
    for item in macro_items:
        if item.key == key:
            return item.sf
    return 0.0


def derived_quantities(macro_items: List[LineItem]) -> Dict[str, float]:
    """Trade quantities that follow the macro areas at seed time."""
    return {
        "conditioned_sf": _quantity_of(macro_items, "conditioned"),
        "roof_cover_sf": roof_cover_sf(macro_items),
        "balcony_sf": _quantity_of(macro_items, "balconies"),
    }


def default_trade_items(macro_items: List[LineItem]) -> List[TradeItem]:
    """Fresh trade items, with derived quantities resolved against macro_items."""
    derived = derived_quantities(macro_items)
    trades = []
    for seed in TRADE_ITEM_SEEDS:
        qty = seed["qty"]
        if isinstance(qty, str):
            qty = derived[qty]
        trades.append(TradeItem.model_validate({**seed, "qty": qty}))
    return trades


def default_soft_costs() -> Dict[str, Range]:
    """Fresh soft-cost ranges keyed by attribute name."""
    return {name: Range(**values) for name, values in SOFT_COST_SEEDS.items()}
