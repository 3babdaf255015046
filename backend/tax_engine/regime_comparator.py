from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional

from loguru import logger

from backend.config import settings
from backend.models.tax_result import RegimeComparison, SlabCharge, TaxResult, TaxSlab
from backend.tax_engine.errors import InvalidIncomeError
from backend.tax_engine.slabs import (
    CESS_RATE,
    REBATE_THRESHOLDS,
    REGIME_LABELS,
    SURCHARGE_BRACKETS,
    Regime,
    RegimeKey,
    get_slabs,
    to_regime,
)


def _check_income(income: float) -> float:
    try:
        value = float(income)
    except (TypeError, ValueError):
        raise InvalidIncomeError(f"Income must be numeric, got {income!r}") from None
    if not math.isfinite(value):
        raise InvalidIncomeError(f"Income must be finite, got {income!r}")
    if value < 0:
        raise InvalidIncomeError(f"Income must be non-negative, got {income!r}")
    return value


def progressive_tax(income: float, slabs: Iterable[TaxSlab]) -> float:
    """Sum of ``rate * portion`` over every bracket the income reaches."""
    tax = 0.0
    for slab in slabs:
        if income > slab.min:
            tax += slab.taxable_portion(income) * slab.rate
    return tax


def slab_breakdown(income: float, regime: RegimeKey, age: Optional[int] = None) -> List[SlabCharge]:
    """
    Per-bracket view of the progressive tax, before the 87A rebate.
    Brackets the income never reaches are included with zero taxable amount.
    """
    income = _check_income(income)
    age = settings.DEFAULT_AGE if age is None else age
    rows: List[SlabCharge] = []
    for slab in get_slabs(regime, age):
        taxable = slab.taxable_portion(income)
        rows.append(SlabCharge(min=slab.min, max=slab.max, rate=slab.rate, taxable=taxable, tax=taxable * slab.rate))
    return rows


def is_rebate_eligible(income: float, regime: RegimeKey) -> bool:
    return income <= REBATE_THRESHOLDS[to_regime(regime)]


def surcharge_rate(income: float) -> float:
    for threshold, rate in SURCHARGE_BRACKETS:
        if income > threshold:
            return rate
    return 0.0


def calculate_tax(income: float, regime: RegimeKey, age: Optional[int] = None) -> TaxResult:
    """
    Tax liability for one (income, regime, age):
      1. progressive slab tax
      2. 87A: tax -> 0 when income is at or below the regime's rebate threshold (no marginal relief)
      3. surcharge on the post-rebate tax, rate tiered by gross income
      4. 4% cess on tax + surcharge
    Amounts are unrounded.
    """
    income = _check_income(income)
    regime = to_regime(regime)
    age = settings.DEFAULT_AGE if age is None else age

    tax = progressive_tax(income, get_slabs(regime, age))
    if is_rebate_eligible(income, regime):
        tax = 0.0

    surcharge = tax * surcharge_rate(income)
    cess = (tax + surcharge) * CESS_RATE
    total = tax + surcharge + cess

    logger.debug("tax regime={} income={} age={} base={} total={}", regime.value, income, age, tax, total)
    return TaxResult(baseTax=tax, surcharge=surcharge, cess=cess, total=total)


def compute_all_regimes(income: float, age: Optional[int] = None) -> Dict[str, TaxResult]:
    return {REGIME_LABELS[regime]: calculate_tax(income, regime, age) for regime in Regime}


def compare_regimes(income: float, age: Optional[int] = None) -> RegimeComparison:
    """
    All three regimes side by side, with the cheapest one and how much it saves
    over the most expensive. Ties go to the earlier regime (new2025 first).
    """
    age = settings.DEFAULT_AGE if age is None else age
    results = compute_all_regimes(income, age)
    best = min(results, key=lambda label: results[label].total)
    worst = max(result.total for result in results.values())
    return RegimeComparison(
        income=_check_income(income),
        age=age,
        results=results,
        best_regime=best,
        savings=worst - results[best].total,
    )
