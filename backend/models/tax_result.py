from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaxSlab(BaseModel):
    """One progressive bracket. ``max=None`` marks the unbounded top bracket."""

    model_config = ConfigDict(frozen=True)

    min: float = Field(ge=0)
    max: Optional[float] = None
    rate: float = Field(ge=0, le=1)

    @property
    def width(self) -> Optional[float]:
        return None if self.max is None else self.max - self.min

    @property
    def unbounded(self) -> bool:
        return self.max is None

    def taxable_portion(self, income: float) -> float:
        if income <= self.min:
            return 0.0
        above = income - self.min
        width = self.width
        return above if width is None else min(above, width)


class TaxResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    baseTax: float = Field(ge=0)
    surcharge: float = Field(ge=0)
    cess: float = Field(ge=0)
    total: float = Field(ge=0)


class SlabCharge(BaseModel):
    min: float
    max: Optional[float] = None
    rate: float
    taxable: float
    tax: float


class RegimeComparison(BaseModel):
    income: float
    age: int
    results: Dict[str, TaxResult]
    best_regime: str
    savings: float
