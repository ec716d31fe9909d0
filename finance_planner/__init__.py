"""Personal-finance calculators: emergency fund, first million and compound interest.

The numeric code lives in :mod:`finance_planner.calculators`; everything the
Streamlit page consumes (formatting, narratives, export, persistence, charts and
forms) lives in :mod:`finance_planner.components`.
"""

__version__ = "0.1.0"
