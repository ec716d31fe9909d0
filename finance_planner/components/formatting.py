"""Currency and number formatting shared by the page, the charts and the exports."""

from __future__ import annotations

CURRENCY_PREFIX = "R$"

# plotly `separators`: decimal mark first, thousands mark second
PLOTLY_SEPARATORS = ",."


def format_currency(value: float) -> str:
    """Brazilian real with two decimals, e.g. ``R$ 1.316,88``."""
    value = float(value)
    sign = "-" if value < 0 and round(abs(value), 2) != 0 else ""
    digits = f"{abs(value):,.2f}"
    # swap US separators for pt-BR ones
    digits = digits.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_PREFIX} {digits}"


def format_number(value: float) -> str:
    """Plain number without a trailing ``.0`` (``10`` / ``10.5``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


__all__ = ["CURRENCY_PREFIX", "PLOTLY_SEPARATORS", "format_currency", "format_number"]
