# app.py
import numpy as np
import streamlit as st

from finance_planner.calculators import compound_interest, emergency_fund, first_million
from finance_planner.calculators.compound_interest import CompoundInterestInput
from finance_planner.calculators.emergency_fund import EmergencyFundInput
from finance_planner.calculators.first_million import FirstMillionInput
from finance_planner.components import export
from finance_planner.components.charts import growth_chart, series_frame
from finance_planner.components.formatting import format_currency
from finance_planner.components.forms import (
    compound_interest_form,
    emergency_fund_form,
    first_million_form,
    render_errors,
)
from finance_planner.components.insights import (
    COMPOUND_INTEREST,
    EMERGENCY_FUND,
    FIRST_MILLION,
    compound_interest_explanation,
    emergency_fund_explanation,
    first_million_explanation,
    pick_motivational_phrase,
)
from finance_planner.components.storage import (
    COMPOUND_INTEREST_KEY,
    EMERGENCY_FUND_KEY,
    FIRST_MILLION_KEY,
    JsonFileStore,
    load_input,
    save_input,
)
from finance_planner.config import load_settings
from finance_planner.utils.logging import get_logger, setup_logging

settings = load_settings()
setup_logging(settings.log_level)
logger = get_logger("app")

# ---------- Page config ----------
st.set_page_config(
    page_title="Calculadora Financeira",
    page_icon="💰",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# Hide Streamlit's default menu and footer
HIDE_STREAMLIT_STYLE = """
    <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
    </style>
"""
st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)

st.markdown(
    """
<style>
.block-container {
    padding: 2rem 1rem;
    max-width: 820px;
}

/* Result cards */
div[data-testid="stMetric"] {
    background: #F8FAFC;
    border-radius: 8px;
    padding: 1rem;
    border: 1px solid #E2E8F0;
}
div.stPlotlyChart {
    background: #FFFFFF;
    border-radius: 8px;
    padding: 0.75rem;
    border: 1px solid #E2E8F0;
}

h1 {
    text-align: center;
    font-size: 1.75rem;
}
.motivational {
    text-align: center;
    font-style: italic;
    color: #64748B;
    font-size: 0.9rem;
}
</style>
""",
    unsafe_allow_html=True,
)

store = JsonFileStore(settings.data_dir)

# ---------- Session boot ----------
if "inputs" not in st.session_state:
    st.session_state["inputs"] = {
        EMERGENCY_FUND: load_input(store, EMERGENCY_FUND_KEY, EmergencyFundInput.from_snapshot, EmergencyFundInput()),
        FIRST_MILLION: load_input(store, FIRST_MILLION_KEY, FirstMillionInput.from_snapshot, FirstMillionInput()),
        COMPOUND_INTEREST: load_input(store, COMPOUND_INTEREST_KEY, CompoundInterestInput.from_snapshot, CompoundInterestInput()),
    }
    st.session_state["results"] = {}
    # a stored emergency-fund / first-million input is shown right away when it validates
    for name, engine in ((EMERGENCY_FUND, emergency_fund), (FIRST_MILLION, first_million)):
        data = st.session_state["inputs"][name]
        if engine.validate(data).ok:
            st.session_state["results"][name] = engine.compute(data)
    rng = np.random.default_rng()
    st.session_state["phrases"] = {
        name: pick_motivational_phrase(name, rng) for name in (EMERGENCY_FUND, FIRST_MILLION, COMPOUND_INTEREST)
    }

inputs = st.session_state["inputs"]
results = st.session_state["results"]
phrases = st.session_state["phrases"]


def _submit(name, engine, key, data):
    """Validate, then compute and persist. Returns the validation result."""
    validation = engine.validate(data)
    if validation.ok:
        results[name] = engine.compute(data)
        inputs[name] = data
        save_input(store, key, data)
    else:
        results.pop(name, None)
        logger.info("%s input rejected: %s", name, sorted(k.value for k in validation.kinds()))
    return validation


def _motivational(name):
    st.markdown(f"<p class='motivational'>{phrases[name]}</p>", unsafe_allow_html=True)


def _downloads(name, title, filename, report, series=None):
    c1, c2 = st.columns(2)
    c1.download_button(
        "⬇️ Exportar resultado (.txt)",
        data=report.encode("utf-8"),
        file_name=filename,
        mime="text/plain",
        key=f"{name}_txt",
        use_container_width=True,
    )
    c2.download_button(
        "⬇️ Exportar PDF",
        data=export.build_pdf(title, report, series),
        file_name=export.pdf_filename(filename),
        mime="application/pdf",
        key=f"{name}_pdf",
        use_container_width=True,
    )


st.title("Financeira Inteligente")
tab_emergency, tab_million, tab_compound = st.tabs(
    ["Reserva de Emergência", "Primeiro Milhão", "Juros Compostos"]
)

# ====== EMERGENCY FUND ======
with tab_emergency:
    data, submitted = emergency_fund_form(inputs[EMERGENCY_FUND])
    if submitted:
        render_errors(_submit(EMERGENCY_FUND, emergency_fund, EMERGENCY_FUND_KEY, data))

    result = results.get(EMERGENCY_FUND)
    if result is not None:
        shown = inputs[EMERGENCY_FUND]
        st.metric("Sua reserva ideal é de:", format_currency(result.ideal_reserve))
        st.caption(emergency_fund_explanation(shown.profile))
        _motivational(EMERGENCY_FUND)
        report = export.emergency_fund_report(shown, result, phrases[EMERGENCY_FUND])
        _downloads(EMERGENCY_FUND, export.EMERGENCY_FUND_TITLE, export.EMERGENCY_FUND_FILENAME, report)

# ====== FIRST MILLION ======
with tab_million:
    st.subheader("Quando chego no 1º milhão")
    st.caption("Calcule quanto você precisa investir mensalmente para alcançar R$ 1.000.000")
    data, submitted = first_million_form(inputs[FIRST_MILLION])
    if submitted:
        render_errors(_submit(FIRST_MILLION, first_million, FIRST_MILLION_KEY, data))

    result = results.get(FIRST_MILLION)
    if result is not None:
        shown = inputs[FIRST_MILLION]
        monthly = result.required_monthly_contribution
        st.metric("Aporte mensal necessário:", format_currency(monthly))
        st.caption(first_million_explanation(shown, monthly))
        _motivational(FIRST_MILLION)
        report = export.first_million_report(shown, result, phrases[FIRST_MILLION])
        _downloads(FIRST_MILLION, export.FIRST_MILLION_TITLE, export.FIRST_MILLION_FILENAME, report)

# ====== COMPOUND INTEREST ======
with tab_compound:
    data, submitted = compound_interest_form(inputs[COMPOUND_INTEREST])
    if submitted:
        render_errors(_submit(COMPOUND_INTEREST, compound_interest, COMPOUND_INTEREST_KEY, data))

    result = results.get(COMPOUND_INTEREST)
    if result is not None:
        shown = inputs[COMPOUND_INTEREST]
        k1, k2 = st.columns(2)
        k1.metric("Montante final:", format_currency(result.final_amount))
        k2.metric("Total de juros ganhos:", format_currency(result.interest_gained))
        st.caption(compound_interest_explanation(shown, result))

        st.plotly_chart(growth_chart(result.series), use_container_width=True)

        df = series_frame(result.series)
        with st.expander("Tabela de evolução"):
            st.dataframe(df, use_container_width=True, hide_index=True)
            st.download_button(
                "⬇️ CSV",
                data=df.to_csv(index=False).encode("utf-8"),
                file_name="juros-compostos.csv",
                mime="text/csv",
                key="compound_interest_csv",
            )

        _motivational(COMPOUND_INTEREST)
        report = export.compound_interest_report(shown, result, phrases[COMPOUND_INTEREST])
        _downloads(
            COMPOUND_INTEREST,
            export.COMPOUND_INTEREST_TITLE,
            export.COMPOUND_INTEREST_FILENAME,
            report,
            result.series,
        )
