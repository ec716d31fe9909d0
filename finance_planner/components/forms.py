# finance_planner/components/forms.py
import math

import streamlit as st

from ..calculators.compound_interest import Capitalization, CompoundInterestInput, TimeUnit
from ..calculators.emergency_fund import EmergencyFundInput, Profile
from ..calculators.first_million import FirstMillionInput
from ..calculators.validation import (
    MAX_RATE_PCT,
    MAX_TERM_MONTHS,
    MAX_TERM_YEARS,
    MIN_RATE_PCT,
    ValidationResult,
)
from .insights import PROFILE_LABELS

# Stable widget keys so the three tabs never collide
WIDGET_KEYS = {
    "monthly_expenses": "ef_monthly_expenses",
    "profile": "ef_profile",

    "initial_investment": "fm_initial_investment",
    "annual_interest_rate_pct": "fm_annual_interest_rate",
    "years": "fm_years",

    "initial_capital": "ci_initial_capital",
    "interest_rate_pct": "ci_interest_rate",
    "capitalization": "ci_capitalization",
    "time": "ci_time",
    "time_unit": "ci_time_unit",
    "monthly_contribution": "ci_monthly_contribution",
}

TIME_UNIT_LABELS = {TimeUnit.YEARS: "ANOS", TimeUnit.MONTHS: "MESES"}
CAPITALIZATION_LABELS = {Capitalization.ANNUAL: "ANUAL", Capitalization.MONTHLY: "MENSAL"}

FIELD_LABELS = {
    "monthly_expenses": "Custos fixos",
    "initial_investment": "Valor já investido",
    "annual_interest_rate_pct": "Taxa de juros",
    "years": "Prazo",
    "initial_capital": "Valor inicial",
    "interest_rate_pct": "Taxa de juros",
    "time": "Período",
    "monthly_contribution": "Investimento mensal",
}


def within_range(value, low, high):
    """Stored inputs may be out of range; number_input rejects such a default."""
    if not math.isfinite(value):
        return low
    return min(max(value, low), high)


def render_errors(result: ValidationResult):
    """One error box per invalid field, labelled like the form."""
    for err in result.errors:
        st.error(f"{FIELD_LABELS.get(err.field, err.field)}: {err.message}")


def emergency_fund_form(defaults: EmergencyFundInput):
    """Render the emergency fund inputs. Returns ``(input, submitted)``."""
    with st.form("emergency_fund_form"):
        monthly_expenses = st.number_input(
            "Valor mensal dos custos fixos (R$)",
            value=float(defaults.monthly_expenses), step=100.0, format="%.2f",
            key=WIDGET_KEYS["monthly_expenses"],
        )
        profiles = list(Profile)
        profile = st.radio(
            "Perfil profissional", profiles,
            index=profiles.index(defaults.profile),
            format_func=lambda p: PROFILE_LABELS[p],
            key=WIDGET_KEYS["profile"],
        )
        submitted = st.form_submit_button("Calcular", type="primary", use_container_width=True)

    data = EmergencyFundInput(monthly_expenses=float(monthly_expenses), profile=Profile(profile))
    return data, submitted


def first_million_form(defaults: FirstMillionInput):
    with st.form("first_million_form"):
        initial_investment = st.number_input(
            "Valor já investido (PV) (R$)",
            value=float(defaults.initial_investment), step=1000.0, format="%.2f",
            key=WIDGET_KEYS["initial_investment"],
        )
        rate = st.number_input(
            "Taxa de juros anual (%)",
            value=within_range(float(defaults.annual_interest_rate_pct), MIN_RATE_PCT, MAX_RATE_PCT),
            min_value=MIN_RATE_PCT, max_value=MAX_RATE_PCT, step=0.1,
            key=WIDGET_KEYS["annual_interest_rate_pct"],
        )
        years = st.number_input(
            "Prazo em anos",
            value=within_range(int(defaults.years), 1, MAX_TERM_YEARS),
            min_value=1, max_value=MAX_TERM_YEARS, step=1,
            key=WIDGET_KEYS["years"],
        )
        submitted = st.form_submit_button("Calcular", type="primary", use_container_width=True)

    data = FirstMillionInput(
        initial_investment=float(initial_investment),
        annual_interest_rate_pct=float(rate),
        years=int(years),
    )
    return data, submitted


def compound_interest_form(defaults: CompoundInterestInput):
    with st.form("compound_interest_form"):
        c1, c2 = st.columns(2)
        with c1:
            initial_capital = st.number_input(
                "Valor inicial (R$)",
                value=float(defaults.initial_capital), step=100.0, format="%.2f",
                key=WIDGET_KEYS["initial_capital"],
            )

            r1, r2 = st.columns([2, 1])
            rate = r1.number_input(
                "Taxa de juros (%)",
                value=within_range(float(defaults.interest_rate_pct), MIN_RATE_PCT, MAX_RATE_PCT),
                min_value=MIN_RATE_PCT, max_value=MAX_RATE_PCT, step=0.1,
                key=WIDGET_KEYS["interest_rate_pct"],
            )
            caps = list(Capitalization)
            capitalization = r2.selectbox(
                "Capitalização", caps,
                index=caps.index(defaults.capitalization),
                format_func=lambda c: CAPITALIZATION_LABELS[c],
                key=WIDGET_KEYS["capitalization"],
            )
        with c2:
            t1, t2 = st.columns([2, 1])
            time = t1.number_input(
                "Período",
                value=within_range(int(defaults.time), 1, MAX_TERM_MONTHS),
                min_value=1, max_value=MAX_TERM_MONTHS, step=1,
                key=WIDGET_KEYS["time"],
            )
            units = list(TimeUnit)
            time_unit = t2.selectbox(
                "Unidade", units,
                index=units.index(defaults.time_unit),
                format_func=lambda u: TIME_UNIT_LABELS[u],
                key=WIDGET_KEYS["time_unit"],
            )

            monthly = st.number_input(
                "Investimento mensal (R$)",
                value=float(defaults.monthly_contribution), step=100.0, format="%.2f",
                key=WIDGET_KEYS["monthly_contribution"],
            )
        submitted = st.form_submit_button("Calcular", type="primary", use_container_width=True)

    data = CompoundInterestInput(
        initial_capital=float(initial_capital),
        interest_rate_pct=float(rate),
        time=int(time),
        time_unit=TimeUnit(time_unit),
        monthly_contribution=float(monthly),
        capitalization=Capitalization(capitalization),
    )
    return data, submitted
