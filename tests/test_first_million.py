"""Tests for the first-million savings plan solver."""

import math

import pytest

from finance_planner.calculators import first_million as fm
from finance_planner.calculators.first_million import TARGET_FUTURE_VALUE, FirstMillionInput
from finance_planner.calculators.validation import ErrorKind, InvalidInputError


def _project(data: FirstMillionInput, pmt: float) -> float:
    n = data.years * 12
    r = data.annual_interest_rate_pct / 100 / 12
    growth = (1 + r) ** n
    return data.initial_investment * growth + pmt * (growth - 1) / r


def test_twenty_years_at_ten_percent_from_zero():
    res = fm.compute(FirstMillionInput(initial_investment=0, annual_interest_rate_pct=10, years=20))
    # 1 000 000 / 759.3688 (annuity factor for 240 months at 10%/12)
    assert res.required_monthly_contribution == pytest.approx(1316.88, abs=0.01)


@pytest.mark.parametrize(
    "pv, rate, years",
    [(0, 10, 20), (50000, 8.5, 15), (250000, 0.1, 30), (1000, 100, 1), (0, 6, 40)],
)
def test_contribution_closes_the_gap_to_one_million(pv, rate, years):
    data = FirstMillionInput(initial_investment=pv, annual_interest_rate_pct=rate, years=years)
    pmt = fm.compute(data).required_monthly_contribution
    assert pmt > 0
    assert _project(data, pmt) == pytest.approx(TARGET_FUTURE_VALUE, abs=1e-2)


def test_lump_sum_above_target_clamps_to_zero():
    res = fm.compute(FirstMillionInput(initial_investment=1_000_000, annual_interest_rate_pct=10, years=1))
    assert res.required_monthly_contribution == 0


def test_clamp_whenever_lump_sum_alone_reaches_target():
    data = FirstMillionInput(initial_investment=400_000, annual_interest_rate_pct=12, years=10)
    r = 0.12 / 12
    assert data.initial_investment * (1 + r) ** 120 >= TARGET_FUTURE_VALUE
    assert fm.compute(data).required_monthly_contribution == 0


def test_more_time_needs_less_per_month():
    short = fm.compute(FirstMillionInput(10000, 9, 10)).required_monthly_contribution
    long = fm.compute(FirstMillionInput(10000, 9, 25)).required_monthly_contribution
    assert long < short


def test_all_violations_reported_together():
    data = FirstMillionInput(initial_investment=-1, annual_interest_rate_pct=0.05, years=0)
    result = fm.validate(data)
    assert result.kinds() == {ErrorKind.NEGATIVE_AMOUNT, ErrorKind.RATE_OUT_OF_RANGE, ErrorKind.TERM_TOO_SHORT}
    assert result.messages() == {
        "initial_investment": "O valor inicial não pode ser negativo",
        "annual_interest_rate_pct": "A taxa deve ser maior que 0.1%",
        "years": "O prazo deve ser de pelo menos 1 ano",
    }
    with pytest.raises(InvalidInputError) as exc:
        fm.compute(data)
    assert exc.value.result == result


@pytest.mark.parametrize("rate, ok", [(0.1, True), (100, True), (0.09, False), (100.01, False)])
def test_rate_bounds_are_inclusive(rate, ok):
    assert fm.validate(FirstMillionInput(0, rate, 5)).ok is ok


def test_rate_above_range_message():
    result = fm.validate(FirstMillionInput(0, 150, 5))
    assert result.for_field("annual_interest_rate_pct").message == "A taxa deve ser menor que 100%"


def test_contribution_breakdown():
    data = FirstMillionInput(initial_investment=20000, annual_interest_rate_pct=10, years=20)
    total, interest = fm.contribution_breakdown(data, 1000.0)
    assert math.isclose(total, 20000 + 1000 * 240)
    assert math.isclose(interest, 1_000_000 - total)


def test_snapshot_round_trip():
    data = FirstMillionInput(initial_investment=1500.5, annual_interest_rate_pct=11.25, years=18)
    snap = data.to_snapshot()
    assert snap == {"initialInvestment": 1500.5, "annualInterestRate": 11.25, "years": 18}
    assert FirstMillionInput.from_snapshot(snap) == data


def test_hundred_years_at_top_rate_is_computed():
    res = fm.compute(FirstMillionInput(initial_investment=0, annual_interest_rate_pct=100, years=100))
    assert math.isfinite(res.required_monthly_contribution)
    assert res.required_monthly_contribution > 0


def test_term_beyond_hundred_years_is_rejected():
    data = FirstMillionInput(initial_investment=0, annual_interest_rate_pct=100, years=1000)
    result = fm.validate(data)
    assert result.kinds() == {ErrorKind.TERM_TOO_LONG}
    assert result.for_field("years").message == "O prazo deve ser de no máximo 100 anos"
    with pytest.raises(InvalidInputError):
        fm.compute(data)


def test_fractional_years_are_rejected():
    result = fm.validate(FirstMillionInput(initial_investment=0, annual_interest_rate_pct=10, years=2.5))
    assert result.kinds() == {ErrorKind.TERM_TOO_SHORT}
