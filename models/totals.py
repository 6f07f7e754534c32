"""Totals result model for the addition estimator."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from models.estimate_range import Range


class Totals(BaseModel):
    """Derived subtotal/total ranges for a set of line items.

    Totals are recomputed from inputs whenever they are needed; nothing
    holds on to an instance and edits it.
    """

    hard: Range = Field(default_factory=Range.zero, description="Σ quantity × unit cost")
    ae: Range = Field(default_factory=Range.zero, description="Architecture & engineering fee")
    cont: Range = Field(default_factory=Range.zero, description="Contingency")
    all_in: Range = Field(
        default_factory=Range.zero,
        description="hard + ae + cont + permits + other allowances"
    )

    @classmethod
    def zero(cls) -> "Totals":
        """Create an all-zero totals result."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict format for display and export consumers."""
        return {
            "hard": self.hard.to_dict(),
            "ae": self.ae.to_dict(),
            "cont": self.cont.to_dict(),
            "allIn": self.all_in.to_dict(),
        }
