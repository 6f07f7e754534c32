"""Line item models for the addition estimator.

Macro building areas are LineItems; detailed trade scopes are TradeItems,
which carry a display-only unit kind and are normalized into LineItems
before totals are computed.
"""

from enum import Enum

from pydantic import BaseModel, Field

from models.estimate_range import Range


# Namespace prepended to trade keys so they never collide with macro keys
TRADE_KEY_PREFIX = "trade:"


# =============================================================================
# ENUMS
# =============================================================================


class UnitKind(str, Enum):
    """Unit of measure shown next to a trade quantity."""

    SF = "SF"    # square feet
    LF = "LF"    # linear feet
    EA = "EA"    # each
    ALW = "ALW"  # allowance (quantity of 1)


class ApplyMode(str, Enum):
    """Base used for percentage soft costs (A/E and contingency)."""

    HARD_ONLY = "HARD_ONLY"
    HARD_PLUS_PERMITS_OTHERS = "HARD_PLUS_PERMITS_OTHERS"

    @property
    def label(self) -> str:
        """Short human-readable label."""
        if self is ApplyMode.HARD_ONLY:
            return "Hard only"
        return "Hard + permits + other"


# =============================================================================
# LINE ITEM MODELS
# =============================================================================


class LineItem(BaseModel):
    """A single cost driver: quantity × unit-cost range."""

    key: str = Field(..., description="Identifier, unique within its collection")
    label: str = Field(..., description="Human-readable scope name")
    sf: float = Field(
        0.0, description="Quantity (square feet, count, or 1 for an allowance)"
    )
    unit: Range = Field(default_factory=Range.zero, description="$ per unit (low/mid/high)")

    def cost(self) -> Range:
        """Cost contribution = sf × unit, band by band."""
        return self.unit * self.sf


class TradeItem(BaseModel):
    """A trade scope entry with a display-only unit kind."""

    key: str = Field(..., description="Identifier, unique among trades")
    label: str = Field(..., description="Human-readable scope name")
    qty: float = Field(0.0, description="Quantity in unit_kind units")
    unit_kind: UnitKind = Field(..., description="Display unit (SF/LF/EA/ALW)")
    unit: Range = Field(default_factory=Range.zero, description="$ per unit (low/mid/high)")

    def cost(self) -> Range:
        """Cost contribution = qty × unit, band by band."""
        return self.unit * self.qty
