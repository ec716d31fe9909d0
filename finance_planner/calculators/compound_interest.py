"""Compound interest projector with monthly contributions.

Everything is normalised to a monthly rate and a month count before the future
value is taken:

* ``ANNUAL`` capitalization converts the stated annual rate to the effective
  monthly rate ``(1 + i)^(1/12) - 1``; ``MONTHLY`` uses ``i / 12``.
* ``YEARS`` multiplies the term by 12; ``MONTHS`` uses it as is.
* Contributions are made at the end of each month (ordinary annuity)::

      FV = C (1 + r)^n + M ((1 + r)^n - 1) / r

The value series used by the chart and the exports evaluates the same formula
at sampled month counts:

* ``YEARS`` – one point per whole year, ``0..time`` inclusive.
* ``MONTHS`` – every ``max(1, time // 12)`` months starting at 0 while the
  month does not exceed ``time``.  The last point is below ``time`` when the
  stride does not divide it.

Sampled amounts are rounded to cents; ``final_amount`` and ``interest_gained``
keep full precision and are formatted by the caller.

Example
-------

>>> res = compute(CompoundInterestInput(initial_capital=1000, interest_rate_pct=10, time=5))
>>> round(res.final_amount, 2), len(res.series)
(1610.51, 6)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple

from .validation import (
    MAX_TERM_MONTHS,
    MAX_TERM_YEARS,
    ErrorKind,
    ValidationResult,
    collect,
    ensure_valid,
    require_non_negative,
    require_positive,
    require_rate,
    require_term,
)


class TimeUnit(str, Enum):
    YEARS = "anos"
    MONTHS = "meses"


class Capitalization(str, Enum):
    ANNUAL = "anual"
    MONTHLY = "mensal"


PERIOD_LABELS = {
    TimeUnit.YEARS: "Ano",
    TimeUnit.MONTHS: "Mês",
}


@dataclass(frozen=True)
class CompoundInterestInput:
    initial_capital: float = 1000.0
    interest_rate_pct: float = 10.0
    time: int = 5
    time_unit: TimeUnit = TimeUnit.YEARS
    monthly_contribution: float = 0.0
    capitalization: Capitalization = Capitalization.ANNUAL

    def to_snapshot(self) -> dict:
        return {
            "initialCapital": self.initial_capital,
            "interestRate": self.interest_rate_pct,
            "time": self.time,
            "timeUnit": self.time_unit.value,
            "monthlyInvestment": self.monthly_contribution,
            "capitalization": self.capitalization.value,
        }

    @classmethod
    def from_snapshot(cls, data: dict) -> "CompoundInterestInput":
        return cls(
            initial_capital=float(data["initialCapital"]),
            interest_rate_pct=float(data["interestRate"]),
            time=int(data["time"]),
            time_unit=TimeUnit(data["timeUnit"]),
            monthly_contribution=float(data["monthlyInvestment"]),
            capitalization=Capitalization(data["capitalization"]),
        )


@dataclass(frozen=True)
class SeriesPoint:
    label: str
    amount: float


@dataclass(frozen=True)
class CompoundInterestResult:
    final_amount: float
    interest_gained: float
    series: Tuple[SeriesPoint, ...] = field(default=())


def max_term(time_unit: TimeUnit) -> int:
    if TimeUnit(time_unit) is TimeUnit.YEARS:
        return MAX_TERM_YEARS
    return MAX_TERM_MONTHS


def validate(data: CompoundInterestInput) -> ValidationResult:
    return collect([
        require_positive("initial_capital", data.initial_capital,
                         ErrorKind.INVALID_CAPITAL, "O capital inicial deve ser maior que zero"),
        require_rate("interest_rate_pct", data.interest_rate_pct),
        require_term("time", data.time, "O tempo deve ser pelo menos 1", max_term(data.time_unit),
                     f"O tempo deve ser de no máximo {MAX_TERM_YEARS} anos ({MAX_TERM_MONTHS} meses)"),
        require_non_negative("monthly_contribution", data.monthly_contribution,
                             ErrorKind.NEGATIVE_CONTRIBUTION, "O valor não pode ser negativo"),
    ])


def monthly_rate(rate_pct: float, capitalization: Capitalization) -> float:
    i = rate_pct / 100
    if Capitalization(capitalization) is Capitalization.ANNUAL:
        return (1 + i) ** (1 / 12) - 1
    return i / 12


def period_count(time: int, time_unit: TimeUnit) -> int:
    if TimeUnit(time_unit) is TimeUnit.YEARS:
        return time * 12
    return time


def future_value(capital: float, rate: float, contribution: float, months: int) -> float:
    growth = (1 + rate) ** months
    amount = capital * growth
    if contribution > 0:
        amount += contribution * (growth - 1) / rate
    return amount


def sample_months(time: int, time_unit: TimeUnit) -> Iterable[Tuple[int, int]]:
    """Yield ``(label_index, months_elapsed)`` for each chart point."""
    time = int(time)
    if TimeUnit(time_unit) is TimeUnit.YEARS:
        for year in range(time + 1):
            yield year, year * 12
    else:
        interval = max(1, time // 12)
        for month in range(0, time + 1, interval):
            yield month, month


def sample_series(data: CompoundInterestInput) -> Tuple[SeriesPoint, ...]:
    rate = monthly_rate(data.interest_rate_pct, data.capitalization)
    label = PERIOD_LABELS[TimeUnit(data.time_unit)]
    return tuple(
        SeriesPoint(
            label=f"{label} {index}",
            amount=round(future_value(data.initial_capital, rate, data.monthly_contribution, months), 2),
        )
        for index, months in sample_months(data.time, data.time_unit)
    )


def compute(data: CompoundInterestInput) -> CompoundInterestResult:
    ensure_valid(validate(data))
    rate = monthly_rate(data.interest_rate_pct, data.capitalization)
    periods = period_count(data.time, data.time_unit)
    final_amount = future_value(data.initial_capital, rate, data.monthly_contribution, periods)
    interest_gained = final_amount - data.initial_capital - data.monthly_contribution * periods
    return CompoundInterestResult(
        final_amount=final_amount,
        interest_gained=interest_gained,
        series=sample_series(data),
    )


__all__ = [
    "TimeUnit",
    "Capitalization",
    "CompoundInterestInput",
    "CompoundInterestResult",
    "SeriesPoint",
    "validate",
    "monthly_rate",
    "max_term",
    "period_count",
    "future_value",
    "sample_months",
    "sample_series",
    "compute",
]
