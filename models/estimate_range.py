"""Low/mid/high range model for the addition estimator.

A Range carries one magnitude per uncertainty band. It is used both for
money (unit costs, subtotals, allowances) and for percentages (A/E fee,
contingency).
"""

from typing import Dict, Tuple

from pydantic import BaseModel, Field


BANDS: Tuple[str, str, str] = ("low", "mid", "high")


# =============================================================================
# RANGE MODEL (LOW/MID/HIGH)
# =============================================================================


class Range(BaseModel):
    """Three-band estimate magnitude.

    low <= mid <= high is the usual shape but is not enforced: ranges are
    user-editable and are computed with exactly as entered. Negative values
    are accepted for the same reason.
    """

    low: float = Field(0.0, description="Low band")
    mid: float = Field(0.0, description="Mid band")
    high: float = Field(0.0, description="High band")

    @classmethod
    def zero(cls) -> "Range":
        """Create a zero range."""
        return cls(low=0.0, mid=0.0, high=0.0)

    @classmethod
    def uniform(cls, value: float) -> "Range":
        """Create a range with the same value in every band."""
        return cls(low=value, mid=value, high=value)

    def band(self, name: str) -> float:
        """Return the value of a single band by name."""
        if name not in BANDS:
            raise KeyError(f"Unknown band {name!r}; expected one of {BANDS}")
        return getattr(self, name)

    def __add__(self, other: "Range") -> "Range":
        """Add two ranges band by band."""
        return Range(
            low=self.low + other.low,
            mid=self.mid + other.mid,
            high=self.high + other.high
        )

    def __mul__(self, factor: float) -> "Range":
        """Multiply every band by a scalar factor."""
        return Range(
            low=self.low * factor,
            mid=self.mid * factor,
            high=self.high * factor
        )

    __rmul__ = __mul__

    def percent_of(self, base: "Range") -> "Range":
        """Treat this range as percentages and apply them to base, band by band.

        Args:
            base: Dollar amounts the percentages apply to.

        Returns:
            Range where each band is (self[band] / 100) * base[band].
        """
        return Range(
            low=(self.low / 100) * base.low,
            mid=(self.mid / 100) * base.mid,
            high=(self.high / 100) * base.high
        )

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {
            "low": self.low,
            "mid": self.mid,
            "high": self.high
        }
