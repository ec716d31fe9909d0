"""Monthly savings plan that reaches R$ 1.000.000.

The required contribution is the payment of an ordinary annuity whose future
value, added to the compounded initial investment, equals the target after
``years * 12`` months at the nominal rate ``rate / 100 / 12``.

Example
-------

>>> res = compute(FirstMillionInput(initial_investment=0, annual_interest_rate_pct=10, years=20))
>>> round(res.required_monthly_contribution, 2)
1316.88
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .validation import (
    MAX_TERM_YEARS,
    ErrorKind,
    ValidationResult,
    collect,
    ensure_valid,
    require_non_negative,
    require_rate,
    require_term,
)

TARGET_FUTURE_VALUE = 1_000_000.0


@dataclass(frozen=True)
class FirstMillionInput:
    initial_investment: float = 0.0
    annual_interest_rate_pct: float = 10.0
    years: int = 20

    def to_snapshot(self) -> dict:
        return {
            "initialInvestment": self.initial_investment,
            "annualInterestRate": self.annual_interest_rate_pct,
            "years": self.years,
        }

    @classmethod
    def from_snapshot(cls, data: dict) -> "FirstMillionInput":
        return cls(
            initial_investment=float(data["initialInvestment"]),
            annual_interest_rate_pct=float(data["annualInterestRate"]),
            years=int(data["years"]),
        )


@dataclass(frozen=True)
class FirstMillionResult:
    required_monthly_contribution: float


def validate(data: FirstMillionInput) -> ValidationResult:
    return collect([
        require_non_negative("initial_investment", data.initial_investment,
                             ErrorKind.NEGATIVE_AMOUNT, "O valor inicial não pode ser negativo"),
        require_rate("annual_interest_rate_pct", data.annual_interest_rate_pct),
        require_term("years", data.years, "O prazo deve ser de pelo menos 1 ano",
                     MAX_TERM_YEARS, f"O prazo deve ser de no máximo {MAX_TERM_YEARS} anos"),
    ])


def compute(data: FirstMillionInput) -> FirstMillionResult:
    """Monthly payment (ordinary annuity) that grows the initial investment to the target.

    PMT = (FV - PV * (1 + r)^n) * r / ((1 + r)^n - 1), with n = years * 12 and
    r = rate / 100 / 12.  Validation keeps the rate >= 0.1 %, so r > 0 and the
    denominator never vanishes; there is no separate zero-rate branch.

    A negative PMT means the lump sum alone already passes the target at
    maturity, so the reported contribution is clamped to 0.
    """
    ensure_valid(validate(data))
    n = data.years * 12
    r = data.annual_interest_rate_pct / 100 / 12
    growth = (1 + r) ** n
    future_value_of_pv = data.initial_investment * growth
    pmt = ((TARGET_FUTURE_VALUE - future_value_of_pv) * r) / (growth - 1)
    return FirstMillionResult(required_monthly_contribution=pmt if pmt > 0 else 0.0)


def contribution_breakdown(data: FirstMillionInput, monthly_contribution: float) -> Tuple[float, float]:
    """Return ``(total_invested, interest_earned)`` quoted in the explanation text."""
    total_invested = data.initial_investment + monthly_contribution * data.years * 12
    interest_earned = TARGET_FUTURE_VALUE - total_invested
    return total_invested, interest_earned


__all__ = [
    "TARGET_FUTURE_VALUE",
    "FirstMillionInput",
    "FirstMillionResult",
    "validate",
    "compute",
    "contribution_breakdown",
]
