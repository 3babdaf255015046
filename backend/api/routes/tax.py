"""
TaxIQ — Income Tax API Routes
Regime comparison, single-regime calculation with slab breakdown, slab tables.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException, Query
from loguru import logger
from pydantic import BaseModel

from backend.models.tax_result import RegimeComparison, TaxSlab
from backend.pipelines.income_parser import MAX_AGE, parse_age, parse_income
from backend.tax_engine.errors import TaxCalculationError, UnknownRegimeError
from backend.tax_engine.regime_comparator import calculate_tax, compare_regimes, slab_breakdown
from backend.tax_engine.slabs import REBATE_THRESHOLDS, REGIME_LABELS, get_slabs, to_regime

router = APIRouter(prefix="/api/tax", tags=["tax"])


class CalculationRequest(BaseModel):
    income: Union[str, float]
    age: Optional[Union[int, str]] = None


def _parse(req: CalculationRequest):
    try:
        return parse_income(req.income), parse_age(req.age)
    except TaxCalculationError as e:
        logger.warning("Rejected tax input: {}", str(e))
        raise HTTPException(status_code=422, detail=str(e))


def _regime_or_404(regime: str):
    try:
        return to_regime(regime)
    except UnknownRegimeError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/calculate", response_model=RegimeComparison)
async def calculate_all(req: CalculationRequest) -> RegimeComparison:
    """Compare all three regimes for one income and age."""
    income, age = _parse(req)
    return compare_regimes(income, age)


@router.post("/calculate/{regime}")
async def calculate_one(regime: str, req: CalculationRequest) -> Dict[str, Any]:
    r = _regime_or_404(regime)
    income, age = _parse(req)
    return {
        "regime": r.value,
        "label": REGIME_LABELS[r],
        "income": income,
        "age": age,
        "rebate_threshold": REBATE_THRESHOLDS[r],
        "result": calculate_tax(income, r, age).model_dump(),
        "breakdown": [row.model_dump() for row in slab_breakdown(income, r, age)],
    }


@router.get("/slabs/{regime}", response_model=List[TaxSlab])
async def slabs(regime: str, age: Optional[int] = Query(None, ge=0, le=MAX_AGE)) -> List[TaxSlab]:
    return list(get_slabs(_regime_or_404(regime), parse_age(age)))
