import math
import re
from typing import Optional, Union

from backend.config import settings
from backend.tax_engine.errors import InvalidAgeError, InvalidIncomeError


_CURRENCY_PREFIX = re.compile(r"^(₹|rs\.?|inr)\s*", re.IGNORECASE)

MAX_AGE = 120


def _clean(raw: str) -> str:
    s = _CURRENCY_PREFIX.sub("", raw.strip())
    return s.replace(",", "").strip()


def parse_income(raw: Union[str, int, float, None]) -> float:
    """
    Turn a form value like "12,00,000" or "₹ 5,00,000" into a non-negative float.
    Thousands separators follow either Indian or western grouping; both are stripped.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidIncomeError("Please enter a valid income amount")
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        s = _clean(raw)
        if not s:
            raise InvalidIncomeError("Please enter a valid income amount")
        try:
            value = float(s)
        except ValueError:
            raise InvalidIncomeError(f"Please enter a valid income amount, got {raw!r}") from None

    if not math.isfinite(value) or value < 0:
        raise InvalidIncomeError(f"Please enter a valid income amount, got {raw!r}")
    return value


def parse_age(raw: Union[str, int, None], default: Optional[int] = None) -> int:
    default = settings.DEFAULT_AGE if default is None else default
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    if isinstance(raw, bool):
        raise InvalidAgeError(f"Age must be a whole number, got {raw!r}")
    try:
        age = int(raw.strip()) if isinstance(raw, str) else int(raw)
    except ValueError:
        raise InvalidAgeError(f"Age must be a whole number, got {raw!r}") from None
    if isinstance(raw, float) and raw != age:
        raise InvalidAgeError(f"Age must be a whole number, got {raw!r}")
    if not 0 <= age <= MAX_AGE:
        raise InvalidAgeError(f"Age must be between 0 and {MAX_AGE}, got {age}")
    return age
