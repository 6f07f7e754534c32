"""In-memory project state for a single estimating session.

EstimateProject owns the editable inputs (macro items, trade items,
soft-cost ranges and the apply mode). Edits change one field at a time;
totals are derived from the current inputs on every access and are never
cached or edited.
"""

import math
import re
from typing import Any, Dict, List, Optional

import structlog

from config.errors import ErrorCode, ItemNotFoundError, ValidationError
from config.settings import Settings, settings as default_settings
from models.estimate_range import BANDS, Range
from models.line_item import ApplyMode, LineItem, TradeItem
from models.totals import Totals
from services.line_item_normalizer import merge_items
from services.seed_data import default_macro_items, default_soft_costs, default_trade_items
from services.totals_calculator import compute_totals, compute_view_totals

logger = structlog.get_logger()


SOFT_COST_NAMES = ("ae_pct", "cont_pct", "permits", "other_allowances")


def coerce_number(value: Any) -> float:
    """
    Coerce user input to a float, defaulting to 0 when unparseable.

    Handles:
    - Numbers (int/float): returned as float; NaN, infinities and ints too
      large for a float become 0
    - Strings like "1,500", "$2,500", " 12.5 ": extracts numeric value
    - Empty/None/other types: returns 0

    Returns:
        The numeric value, or 0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return 0.0
    elif isinstance(value, str):
        cleaned = re.sub(r"[\s,$]", "", value)
        try:
            number = float(cleaned) if cleaned else 0.0
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _apply_bands(target: Range, bands: Dict[str, Any]) -> None:
    for band, value in bands.items():
        if value is None:
            continue
        if band not in BANDS:
            raise ValidationError(
                f"Unknown band {band!r}; expected one of {BANDS}",
                field=band,
                code=ErrorCode.INVALID_FIELD,
            )
        setattr(target, band, coerce_number(value))


class EstimateProject:
    """Editable inputs of one estimate plus derived totals."""

    def __init__(
        self,
        items: List[LineItem],
        trades: List[TradeItem],
        ae_pct: Range,
        cont_pct: Range,
        permits: Range,
        other_allowances: Range,
        apply_mode: ApplyMode = ApplyMode.HARD_ONLY,
        name: str = "",
    ):
        self.name = name
        # Own copies, so in-place edits never reach the caller's objects
        self.items = [item.model_copy(deep=True) for item in items]
        self.trades = [trade.model_copy(deep=True) for trade in trades]
        self.ae_pct = ae_pct.model_copy()
        self.cont_pct = cont_pct.model_copy()
        self.permits = permits.model_copy()
        self.other_allowances = other_allowances.model_copy()
        self.apply_mode = ApplyMode(apply_mode)

    @classmethod
    def from_seed(cls, config: Optional[Settings] = None) -> "EstimateProject":
        """Build a project from the session seed data.

        Args:
            config: Settings to take the default apply mode and name from
                (defaults to the module singleton).
        """
        config = config or default_settings
        items = default_macro_items()
        trades = default_trade_items(items)
        project = cls(
            items=items,
            trades=trades,
            apply_mode=config.default_apply_mode,
            name=config.app_name,
            **default_soft_costs(),
        )
        logger.info(
            "project_seeded",
            name=project.name,
            macro_items=len(items),
            trade_items=len(trades),
            apply_mode=project.apply_mode.value,
        )
        return project

    # ------------------------------------------------------------------ lookup
    def get_item(self, key: str) -> LineItem:
        for item in self.items:
            if item.key == key:
                return item
        raise ItemNotFoundError(key, "items")

    def get_trade(self, key: str) -> TradeItem:
        for trade in self.trades:
            if trade.key == key:
                return trade
        raise ItemNotFoundError(key, "trades")

    # ------------------------------------------------------------------- edits
    def update_item(self, key: str, sf: Any = None, **bands: Any) -> LineItem:
        """Edit a macro item's quantity and/or unit-cost bands in place.

        Args:
            key: Macro item key.
            sf: New quantity (coerced; None leaves it unchanged).
            **bands: low/mid/high unit-cost values to change.

        Raises:
            ItemNotFoundError: If no macro item has this key.
            ValidationError: If a band name is unknown.
        """
        item = self.get_item(key)
        if sf is not None:
            item.sf = coerce_number(sf)
        _apply_bands(item.unit, bands)
        logger.debug("item_updated", key=key, sf=item.sf, unit=item.unit.to_dict())
        return item

    def update_trade(self, key: str, qty: Any = None, **bands: Any) -> TradeItem:
        """Edit a trade item's quantity and/or unit-cost bands in place.

        Raises:
            ItemNotFoundError: If no trade has this key.
            ValidationError: If a band name is unknown.
        """
        trade = self.get_trade(key)
        if qty is not None:
            trade.qty = coerce_number(qty)
        _apply_bands(trade.unit, bands)
        logger.debug("trade_updated", key=key, qty=trade.qty, unit=trade.unit.to_dict())
        return trade

    def set_soft_cost(self, name: str, band: str, value: Any) -> Range:
        """Set one band of a soft-cost range (A/E %, contingency %, permits, other).

        Raises:
            ValidationError: If the name or band is unknown.
        """
        if name not in SOFT_COST_NAMES:
            raise ValidationError(
                f"Unknown soft cost {name!r}; expected one of {SOFT_COST_NAMES}",
                field=name,
                code=ErrorCode.INVALID_FIELD,
            )
        target = getattr(self, name)
        _apply_bands(target, {band: value if value is not None else 0.0})
        logger.debug("soft_cost_updated", name=name, band=band, value=target.band(band))
        return target

    def set_apply_mode(self, mode: Any) -> ApplyMode:
        """Switch the base used for percentage soft costs.

        Raises:
            ValidationError: If mode is not a known ApplyMode.
        """
        try:
            new_mode = ApplyMode(mode.upper() if isinstance(mode, str) else mode)
        except ValueError:
            raise ValidationError(
                f"Unknown apply mode {mode!r}",
                field="apply_mode",
                code=ErrorCode.INVALID_APPLY_MODE,
            ) from None
        if new_mode is not self.apply_mode:
            logger.info("apply_mode_changed", old=self.apply_mode.value, new=new_mode.value)
        self.apply_mode = new_mode
        return new_mode

    # ----------------------------------------------------------------- derived
    @property
    def merged_items(self) -> List[LineItem]:
        """Macro items followed by normalized trade items."""
        return merge_items(self.items, self.trades)

    @property
    def total_quantity(self) -> float:
        """Sum of quantities across the merged item set."""
        return sum(item.sf for item in self.merged_items)

    @property
    def baseline_totals(self) -> Totals:
        """Macro items only, fees on hard cost."""
        return compute_totals(
            self.items, self.ae_pct, self.cont_pct, self.permits, self.other_allowances
        )

    @property
    def merged_totals(self) -> Totals:
        """Macro + trade items, fees on hard cost."""
        return compute_totals(
            self.merged_items, self.ae_pct, self.cont_pct, self.permits, self.other_allowances
        )

    @property
    def view_totals(self) -> Totals:
        """Macro + trade items, fees on the base selected by apply_mode."""
        return compute_view_totals(
            self.merged_items,
            self.ae_pct,
            self.cont_pct,
            self.permits,
            self.other_allowances,
            self.apply_mode,
        )

    def soft_costs(self) -> Dict[str, Range]:
        return {name: getattr(self, name) for name in SOFT_COST_NAMES}
