"""Unit tests for the Totals Calculator.

Tests hard-cost aggregation, percentage soft costs, the apply-mode fee
base and the all-in total.
"""

import pytest

from models.estimate_range import Range
from models.line_item import ApplyMode, LineItem
from models.totals import Totals
from services.line_item_normalizer import merge_items, to_line_items
from services.totals_calculator import (
    compute_totals,
    compute_view_totals,
    fee_base,
    hard_cost,
)

from tests.fixtures.mock_estimate_data import (
    get_inverted_item,
    get_macro_items,
    get_single_item,
    get_trade_items,
)


def _approx(r: Range):
    return pytest.approx([r.low, r.mid, r.high])


def _values(r: Range):
    return [r.low, r.mid, r.high]


# =============================================================================
# PRIMARY FORM
# =============================================================================


class TestComputeTotals:
    """Test compute_totals() (fees on hard cost)."""

    def test_single_item_math(self):
        """100 units @ 10/20/30 with 10% fees and no allowances."""
        zero = Range.zero()
        totals = compute_totals(get_single_item(), Range.uniform(10), Range.uniform(10), zero, zero)

        assert totals.hard == Range(low=1000, mid=2000, high=3000)
        assert totals.ae == Range(low=100, mid=200, high=300)
        assert totals.cont == Range(low=100, mid=200, high=300)
        assert totals.all_in == Range(low=1200, mid=2400, high=3600)

    def test_zero_input_totals(self):
        """Empty items with zero modifiers yield exactly zero everywhere."""
        zero = Range.zero()
        totals = compute_totals([], zero, zero, zero, zero)

        assert totals == Totals.zero()
        for field in (totals.hard, totals.ae, totals.cont, totals.all_in):
            assert _values(field) == [0.0, 0.0, 0.0]

    def test_empty_items_still_add_allowances(self):
        """With no items, all-in is just permits + other allowances."""
        permits = Range(low=2500, mid=4000, high=10000)
        other = Range(low=80000, mid=100000, high=150000)
        totals = compute_totals([], Range.uniform(12.5), Range.uniform(12.5), permits, other)

        assert _values(totals.hard) == [0.0, 0.0, 0.0]
        assert _values(totals.ae) == [0.0, 0.0, 0.0]
        assert totals.all_in == Range(low=82500, mid=104000, high=160000)

    def test_bands_use_their_own_percentages(self):
        """Each band takes its own percentage."""
        zero = Range.zero()
        totals = compute_totals(
            get_single_item(), Range(low=10, mid=12.5, high=15), Range(low=5, mid=10, high=20), zero, zero
        )

        assert _approx(totals.ae) == [100, 250, 450]
        assert _approx(totals.cont) == [50, 200, 600]
        assert _approx(totals.all_in) == [1150, 2450, 4050]

    def test_permits_and_other_added_once(self):
        """Allowances go into all-in but not into the fee base."""
        permits = Range.uniform(100)
        other = Range.uniform(50)
        totals = compute_totals(get_single_item(), Range.uniform(10), Range.uniform(10), permits, other)

        assert _approx(totals.ae) == [100, 200, 300]
        assert _approx(totals.all_in) == [1350, 2550, 3750]


# =============================================================================
# HARD COST
# =============================================================================


class TestHardCost:
    """Test hard_cost() aggregation."""

    def test_additivity(self):
        """Adding an item set raises hard cost by exactly that set's own hard cost."""
        macro = get_macro_items()
        extra = get_trade_items()[:1]  # 5 EA @ 100/200/300

        base = hard_cost(macro)
        merged = hard_cost(merge_items(macro, extra))
        own = hard_cost(to_line_items(extra))

        assert _approx(own) == [500, 1000, 1500]
        assert merged.low - base.low == pytest.approx(own.low)
        assert merged.mid - base.mid == pytest.approx(own.mid)
        assert merged.high - base.high == pytest.approx(own.high)

    def test_macro_items_sum(self):
        """Two macro areas sum band by band."""
        assert _approx(hard_cost(get_macro_items())) == [208000, 266000, 324000]

    def test_accepts_generator(self):
        """Any iterable of items is accepted."""
        result = hard_cost(item for item in get_single_item())
        assert result == Range(low=1000, mid=2000, high=3000)

    def test_negative_quantity_not_rejected(self):
        """Negative quantities produce negative contributions."""
        items = [LineItem(key="credit", label="Credit", sf=-10, unit=Range(low=5, mid=6, high=7))]
        assert _values(hard_cost(items)) == [-50, -60, -70]

    def test_inverted_range_computed_as_given(self):
        """low > high is not an error and is not reordered."""
        result = hard_cost([get_inverted_item()])
        assert _values(result) == [300, 200, 100]


# =============================================================================
# APPLY MODE
# =============================================================================


class TestApplyMode:
    """Test fee_base() and compute_view_totals()."""

    @pytest.fixture
    def thousand(self):
        return [LineItem(key="k", label="K", sf=1000, unit=Range.uniform(1))]

    def test_fee_base_hard_only(self):
        hard = Range.uniform(1000)
        assert fee_base(hard, Range.uniform(100), Range.uniform(100), ApplyMode.HARD_ONLY) == hard

    def test_fee_base_plus_permits_others(self):
        base = fee_base(
            Range.uniform(1000), Range.uniform(100), Range.uniform(50), ApplyMode.HARD_PLUS_PERMITS_OTHERS
        )
        assert _values(base) == [1150, 1150, 1150]

    def test_fee_base_accepts_string_mode(self):
        base = fee_base(Range.uniform(1000), Range.uniform(100), Range.uniform(50), "HARD_PLUS_PERMITS_OTHERS")
        assert base.low == 1150

    def test_apply_mode_changes_ae_base(self, thousand):
        """Fees grow when permits/other join the base; allowances still added once."""
        pct = Range.uniform(10)
        allowance = Range.uniform(100)

        hard_only = compute_view_totals(thousand, pct, pct, allowance, allowance, ApplyMode.HARD_ONLY)
        plus = compute_view_totals(
            thousand, pct, pct, allowance, allowance, ApplyMode.HARD_PLUS_PERMITS_OTHERS
        )

        assert _approx(hard_only.ae) == [100, 100, 100]
        assert _approx(plus.ae) == [120, 120, 120]
        assert _approx(plus.cont) == [120, 120, 120]
        assert plus.hard == hard_only.hard
        assert _approx(hard_only.all_in) == [1400, 1400, 1400]
        assert _approx(plus.all_in) == [1440, 1440, 1440]

    def test_monotonic_in_every_band(self):
        """Positive allowances never lower A/E or contingency in any band."""
        items = get_macro_items()
        ae_pct = Range(low=10, mid=12.5, high=15)
        cont_pct = Range(low=10, mid=12.5, high=15)
        permits = Range(low=2500, mid=4000, high=10000)
        other = Range(low=80000, mid=100000, high=150000)

        hard_only = compute_view_totals(items, ae_pct, cont_pct, permits, other, ApplyMode.HARD_ONLY)
        plus = compute_view_totals(items, ae_pct, cont_pct, permits, other, ApplyMode.HARD_PLUS_PERMITS_OTHERS)

        for band in ("low", "mid", "high"):
            assert plus.ae.band(band) > hard_only.ae.band(band)
            assert plus.cont.band(band) > hard_only.cont.band(band)

    def test_modes_equal_without_allowances(self, thousand):
        """Zero permits and other allowances make both modes identical."""
        pct = Range(low=8, mid=10, high=12)
        zero = Range.zero()

        hard_only = compute_view_totals(thousand, pct, pct, zero, zero, ApplyMode.HARD_ONLY)
        plus = compute_view_totals(thousand, pct, pct, zero, zero, ApplyMode.HARD_PLUS_PERMITS_OTHERS)

        assert plus == hard_only

    def test_hard_only_matches_primary_form(self):
        """The view variant under HARD_ONLY equals compute_totals()."""
        items = merge_items(get_macro_items(), get_trade_items())
        pct = Range(low=10, mid=12.5, high=15)
        permits = Range(low=2500, mid=4000, high=10000)
        other = Range(low=80000, mid=100000, high=150000)

        assert compute_view_totals(items, pct, pct, permits, other) == compute_totals(
            items, pct, pct, permits, other
        )


class TestTotalsModel:
    """Test Totals serialization."""

    def test_to_dict_uses_all_in_key(self):
        zero = Range.zero()
        d = compute_totals(get_single_item(), Range.uniform(10), Range.uniform(10), zero, zero).to_dict()

        assert set(d) == {"hard", "ae", "cont", "allIn"}
        assert d["allIn"] == {"low": 1200, "mid": 2400, "high": 3600}
