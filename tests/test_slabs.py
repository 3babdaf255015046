"""Tests for the slab tables and regime/age lookup."""

import pytest
from pydantic import ValidationError

from backend.tax_engine.errors import InvalidAgeError, UnknownRegimeError
from backend.tax_engine.slabs import (
    NEW_2024_SLABS,
    NEW_2025_SLABS,
    OLD_SLABS,
    REBATE_THRESHOLDS,
    REGIME_LABELS,
    AgeBand,
    Regime,
    age_band,
    get_slabs,
    to_regime,
)


ALL_TABLES = [NEW_2025_SLABS, NEW_2024_SLABS, *OLD_SLABS.values()]


# ---------------------------------------------------------------------------
# Table shape
# ---------------------------------------------------------------------------

class TestTableShape:

    @pytest.mark.parametrize("table", ALL_TABLES)
    def test_starts_at_zero_and_ends_unbounded(self, table):
        assert table[0].min == 0
        assert table[-1].max is None
        assert all(s.max is not None for s in table[:-1])

    @pytest.mark.parametrize("table", ALL_TABLES)
    def test_brackets_are_contiguous(self, table):
        for lower, upper in zip(table, table[1:]):
            assert lower.max == upper.min
            assert lower.min < upper.min

    def test_bracket_counts(self):
        assert len(NEW_2025_SLABS) == 7
        assert len(NEW_2024_SLABS) == 6
        assert len(OLD_SLABS[AgeBand.GENERAL]) == 4
        assert len(OLD_SLABS[AgeBand.SENIOR]) == 4
        assert len(OLD_SLABS[AgeBand.SUPER_SENIOR]) == 3

    def test_new2025_boundaries(self):
        rows = [(s.min, s.max, s.rate) for s in NEW_2025_SLABS]
        assert rows == [
            (0, 400_000, 0.0),
            (400_000, 800_000, 0.05),
            (800_000, 1_200_000, 0.10),
            (1_200_000, 1_600_000, 0.15),
            (1_600_000, 2_000_000, 0.20),
            (2_000_000, 2_400_000, 0.25),
            (2_400_000, None, 0.30),
        ]

    def test_slabs_are_immutable(self):
        with pytest.raises(ValidationError):
            NEW_2025_SLABS[0].rate = 0.5


# ---------------------------------------------------------------------------
# TaxSlab.taxable_portion
# ---------------------------------------------------------------------------

class TestTaxablePortion:

    def test_below_bracket(self):
        assert NEW_2024_SLABS[1].taxable_portion(200_000) == 0

    def test_inside_bracket(self):
        assert NEW_2024_SLABS[1].taxable_portion(450_000) == 150_000

    def test_capped_at_width(self):
        assert NEW_2024_SLABS[1].taxable_portion(5_000_000) == 400_000

    def test_unbounded_top_bracket(self):
        top = NEW_2024_SLABS[-1]
        assert top.width is None
        assert top.taxable_portion(2_000_000) == 500_000


# ---------------------------------------------------------------------------
# get_slabs
# ---------------------------------------------------------------------------

class TestGetSlabs:

    @pytest.mark.parametrize("age", [0, 30, 65, 90])
    def test_new_regimes_ignore_age(self, age):
        assert get_slabs(Regime.NEW_2025, age) == NEW_2025_SLABS
        assert get_slabs(Regime.NEW_2024, age) == NEW_2024_SLABS

    @pytest.mark.parametrize(
        "age, band",
        [
            (0, AgeBand.GENERAL),
            (59, AgeBand.GENERAL),
            (60, AgeBand.SENIOR),
            (79, AgeBand.SENIOR),
            (80, AgeBand.SUPER_SENIOR),
            (105, AgeBand.SUPER_SENIOR),
        ],
    )
    def test_old_regime_age_bands(self, age, band):
        assert age_band(age) == band
        assert get_slabs(Regime.OLD, age) == OLD_SLABS[band]

    def test_accepts_string_keys(self):
        assert get_slabs("new2024", 30) == NEW_2024_SLABS
        assert get_slabs("old", 60) == OLD_SLABS[AgeBand.SENIOR]

    def test_unknown_regime_fails_fast(self):
        with pytest.raises(UnknownRegimeError) as exc:
            get_slabs("new2026", 30)
        assert exc.value.regime == "new2026"

    def test_negative_age_rejected(self):
        with pytest.raises(InvalidAgeError):
            get_slabs(Regime.OLD, -1)

    def test_repeat_lookup_returns_same_table(self):
        assert get_slabs(Regime.OLD, 45) is get_slabs(Regime.OLD, 45)


class TestRegimeMetadata:

    def test_every_regime_has_threshold_and_label(self):
        for regime in Regime:
            assert regime in REBATE_THRESHOLDS
            assert regime in REGIME_LABELS

    def test_rebate_thresholds(self):
        assert REBATE_THRESHOLDS[Regime.NEW_2025] == 1_200_000
        assert REBATE_THRESHOLDS[Regime.NEW_2024] == 700_000
        assert REBATE_THRESHOLDS[Regime.OLD] == 500_000

    def test_to_regime_passthrough(self):
        assert to_regime(Regime.OLD) is Regime.OLD
        assert to_regime("new2025") is Regime.NEW_2025
