from __future__ import annotations


class TaxCalculationError(ValueError):
    """Base class for rejected calculation inputs."""


class InvalidIncomeError(TaxCalculationError):
    pass


class InvalidAgeError(TaxCalculationError):
    pass


class UnknownRegimeError(TaxCalculationError):
    def __init__(self, regime: object) -> None:
        self.regime = regime
        super().__init__(f"Unknown tax regime: {regime!r}")
