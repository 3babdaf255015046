from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple, Union

from backend.models.tax_result import TaxSlab
from backend.tax_engine.errors import InvalidAgeError, UnknownRegimeError


class Regime(str, Enum):
    NEW_2025 = "new2025"
    NEW_2024 = "new2024"
    OLD = "old"


class AgeBand(str, Enum):
    GENERAL = "general"
    SENIOR = "senior"  # 60-79
    SUPER_SENIOR = "super_senior"  # 80+


RegimeKey = Union[Regime, str]
Slabs = Tuple[TaxSlab, ...]


def _table(*rows: Tuple[float, Optional[float], float]) -> Slabs:
    return tuple(TaxSlab(min=lo, max=hi, rate=rate) for lo, hi, rate in rows)


NEW_2025_SLABS = _table(
    (0, 400_000, 0.0),
    (400_000, 800_000, 0.05),
    (800_000, 1_200_000, 0.10),
    (1_200_000, 1_600_000, 0.15),
    (1_600_000, 2_000_000, 0.20),
    (2_000_000, 2_400_000, 0.25),
    (2_400_000, None, 0.30),
)

NEW_2024_SLABS = _table(
    (0, 300_000, 0.0),
    (300_000, 700_000, 0.05),
    (700_000, 1_000_000, 0.10),
    (1_000_000, 1_200_000, 0.15),
    (1_200_000, 1_500_000, 0.20),
    (1_500_000, None, 0.30),
)

OLD_SLABS: Dict[AgeBand, Slabs] = {
    AgeBand.GENERAL: _table(
        (0, 250_000, 0.0),
        (250_000, 500_000, 0.05),
        (500_000, 1_000_000, 0.20),
        (1_000_000, None, 0.30),
    ),
    AgeBand.SENIOR: _table(
        (0, 300_000, 0.0),
        (300_000, 500_000, 0.05),
        (500_000, 1_000_000, 0.20),
        (1_000_000, None, 0.30),
    ),
    AgeBand.SUPER_SENIOR: _table(
        (0, 500_000, 0.0),
        (500_000, 1_000_000, 0.20),
        (1_000_000, None, 0.30),
    ),
}

# Section 87A: full rebate when income <= threshold
REBATE_THRESHOLDS: Dict[Regime, float] = {
    Regime.NEW_2025: 1_200_000,
    Regime.NEW_2024: 700_000,
    Regime.OLD: 500_000,
}

REGIME_LABELS: Dict[Regime, str] = {
    Regime.NEW_2025: "New Tax Regime 2025-26",
    Regime.NEW_2024: "New Tax Regime 2024-25",
    Regime.OLD: "Old Tax Regime",
}

# Highest threshold first; income must strictly exceed the threshold.
SURCHARGE_BRACKETS: Tuple[Tuple[float, float], ...] = (
    (50_000_000, 0.37),
    (20_000_000, 0.25),
    (10_000_000, 0.15),
    (5_000_000, 0.10),
)

CESS_RATE = 0.04


def to_regime(regime: RegimeKey) -> Regime:
    if isinstance(regime, Regime):
        return regime
    try:
        return Regime(regime)
    except ValueError:
        raise UnknownRegimeError(regime) from None


def age_band(age: int) -> AgeBand:
    if age < 0:
        raise InvalidAgeError(f"Age must be non-negative, got {age}")
    if age >= 80:
        return AgeBand.SUPER_SENIOR
    if age >= 60:
        return AgeBand.SENIOR
    return AgeBand.GENERAL


def get_slabs(regime: RegimeKey, age: int) -> Slabs:
    """
    Ordered slab table for a regime. Age only selects the band for the old regime.
    """
    regime = to_regime(regime)
    band = age_band(age)
    tables: Dict[Regime, Slabs] = {
        Regime.NEW_2025: NEW_2025_SLABS,
        Regime.NEW_2024: NEW_2024_SLABS,
        Regime.OLD: OLD_SLABS[band],
    }
    return tables[regime]
