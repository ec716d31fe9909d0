# finance_planner/components/export.py
# Plain-text and PDF reports for the three calculators.
# Reports only lay out values already computed by the calculators.

import io
from typing import Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..calculators.compound_interest import CompoundInterestInput, CompoundInterestResult, SeriesPoint
from ..calculators.emergency_fund import EmergencyFundInput, EmergencyFundResult
from ..calculators.first_million import FirstMillionInput, FirstMillionResult
from .formatting import format_currency, format_number
from .insights import (
    PROFILE_LABELS,
    compound_interest_explanation,
    emergency_fund_explanation,
    first_million_explanation,
)

EMERGENCY_FUND_FILENAME = "reserva-emergencia.txt"
FIRST_MILLION_FILENAME = "primeiro-milhao.txt"
COMPOUND_INTEREST_FILENAME = "juros-compostos.txt"

EMERGENCY_FUND_TITLE = "Calculadora de Reserva de Emergência"
FIRST_MILLION_TITLE = "Calculadora do Primeiro Milhão"
COMPOUND_INTEREST_TITLE = "Calculadora de Juros Compostos"

LIQUIDITY_ADVICE = "Mantenha esse valor em uma aplicação com alta liquidez e segurança."


def emergency_fund_report(data: EmergencyFundInput, result: EmergencyFundResult, phrase: str) -> str:
    return (
        f"🔹 {EMERGENCY_FUND_TITLE}\n"
        f"\n"
        f"Perfil: {PROFILE_LABELS[data.profile]}\n"
        f"Custo fixo mensal: {format_currency(data.monthly_expenses)}\n"
        f"Reserva ideal: {format_currency(result.ideal_reserve)}\n"
        f"\n"
        f"Recomendação: {emergency_fund_explanation(data.profile)}\n"
        f"{LIQUIDITY_ADVICE}\n"
        f"\n"
        f"{phrase}\n"
    )


def first_million_report(data: FirstMillionInput, result: FirstMillionResult, phrase: str) -> str:
    monthly = result.required_monthly_contribution
    return (
        f"🔹 {FIRST_MILLION_TITLE}\n"
        f"\n"
        f"Valor já investido: {format_currency(data.initial_investment)}\n"
        f"Taxa de juros anual: {format_number(data.annual_interest_rate_pct)}%\n"
        f"Prazo em anos: {data.years}\n"
        f"Aporte mensal necessário: {format_currency(monthly)}\n"
        f"\n"
        f"{first_million_explanation(data, monthly)}\n"
        f"\n"
        f"{phrase}\n"
    )


def compound_interest_report(data: CompoundInterestInput, result: CompoundInterestResult, phrase: str) -> str:
    return (
        f"🔹 {COMPOUND_INTEREST_TITLE}\n"
        f"\n"
        f"Capital inicial: {format_currency(data.initial_capital)}\n"
        f"Taxa de juros: {format_number(data.interest_rate_pct)}% {data.capitalization.value}\n"
        f"Tempo: {data.time} {data.time_unit.value}\n"
        f"Aporte mensal: {format_currency(data.monthly_contribution)}\n"
        f"\n"
        f"Montante final: {format_currency(result.final_amount)}\n"
        f"Total de juros ganhos: {format_currency(result.interest_gained)}\n"
        f"\n"
        f"{compound_interest_explanation(data, result)}\n"
        f"\n"
        f"{phrase}\n"
    )


def build_pdf(title: str, report: str, series: Optional[Sequence[SeriesPoint]] = None) -> bytes:
    """Render a text report (and optionally the value series) as a PDF."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=36, rightMargin=36, title=title)
    styles = getSampleStyleSheet()
    story = [Paragraph(title, styles["Title"]), Spacer(1, 12)]

    # the emoji title line is replaced by the PDF title
    lines = report.splitlines()
    if lines and lines[0].startswith("🔹"):
        lines = lines[1:]
    for line in lines:
        if line.strip():
            story.append(Paragraph(line, styles["BodyText"]))
        else:
            story.append(Spacer(1, 8))

    if series:
        rows = [["Período", "Valor"]] + [[p.label, format_currency(p.amount)] for p in series]
        table = Table(rows, hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#F1F5F9")),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ALIGN", (1, 1), (1, -1), "RIGHT"),
                ]
            )
        )
        story.extend([Spacer(1, 12), Paragraph("Evolução do investimento", styles["Heading2"]), table])

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


def pdf_filename(txt_filename: str) -> str:
    return txt_filename.rsplit(".", 1)[0] + ".pdf"
