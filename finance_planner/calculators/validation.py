"""Validation convention shared by the calculators.

Validation never short-circuits: every check runs and all violated fields are
reported together so the page can show a complete error set in one pass.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Set, Tuple

MIN_RATE_PCT = 0.1
MAX_RATE_PCT = 100.0

# Longest horizon accepted by either engine: 100 years of monthly periods
MAX_TERM_YEARS = 100
MAX_TERM_MONTHS = MAX_TERM_YEARS * 12

RATE_TOO_LOW_MESSAGE = "A taxa deve ser maior que 0.1%"
RATE_TOO_HIGH_MESSAGE = "A taxa deve ser menor que 100%"


class ErrorKind(str, Enum):
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_CAPITAL = "InvalidCapital"
    NEGATIVE_AMOUNT = "NegativeAmount"
    NEGATIVE_CONTRIBUTION = "NegativeContribution"
    RATE_OUT_OF_RANGE = "RateOutOfRange"
    TERM_TOO_SHORT = "TermTooShort"
    TERM_TOO_LONG = "TermTooLong"


@dataclass(frozen=True)
class FieldError:
    field: str
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def kinds(self) -> Set[ErrorKind]:
        return {e.kind for e in self.errors}

    def for_field(self, field: str) -> Optional[FieldError]:
        for e in self.errors:
            if e.field == field:
                return e
        return None

    def messages(self) -> Dict[str, str]:
        """Map field name -> user-facing message, as the forms render them."""
        return {e.field: e.message for e in self.errors}


class InvalidInputError(ValueError):
    """Raised when ``compute`` is called with an input that does not validate."""

    def __init__(self, result: ValidationResult):
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in result.errors))
        self.result = result


def collect(checks: Iterable[Optional[FieldError]]) -> ValidationResult:
    return ValidationResult(errors=tuple(c for c in checks if c is not None))


def ensure_valid(result: ValidationResult) -> None:
    if not result.ok:
        raise InvalidInputError(result)


def _finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def require_positive(field: str, value: float, kind: ErrorKind, message: str) -> Optional[FieldError]:
    if not _finite(value) or value <= 0:
        return FieldError(field, kind, message)
    return None


def require_non_negative(field: str, value: float, kind: ErrorKind, message: str) -> Optional[FieldError]:
    if not _finite(value) or value < 0:
        return FieldError(field, kind, message)
    return None


def require_rate(field: str, rate_pct: float) -> Optional[FieldError]:
    """Percentage must sit in [0.1, 100]."""
    if not _finite(rate_pct) or rate_pct < MIN_RATE_PCT:
        return FieldError(field, ErrorKind.RATE_OUT_OF_RANGE, RATE_TOO_LOW_MESSAGE)
    if rate_pct > MAX_RATE_PCT:
        return FieldError(field, ErrorKind.RATE_OUT_OF_RANGE, RATE_TOO_HIGH_MESSAGE)
    return None


def require_term(
    field: str,
    term: int,
    message: str,
    maximum: int,
    too_long_message: str,
    minimum: int = 1,
) -> Optional[FieldError]:
    """Whole number of periods in ``[minimum, maximum]``.

    Fractional terms are reported as too short with ``message``; the upper
    bound keeps ``(1 + r) ** n`` inside float range.
    """
    if not _finite(term) or term < minimum or not float(term).is_integer():
        return FieldError(field, ErrorKind.TERM_TOO_SHORT, message)
    if term > maximum:
        return FieldError(field, ErrorKind.TERM_TOO_LONG, too_long_message)
    return None


__all__ = [
    "MIN_RATE_PCT",
    "MAX_RATE_PCT",
    "MAX_TERM_YEARS",
    "MAX_TERM_MONTHS",
    "ErrorKind",
    "FieldError",
    "ValidationResult",
    "InvalidInputError",
    "collect",
    "ensure_valid",
    "require_positive",
    "require_non_negative",
    "require_rate",
    "require_term",
]
