"""Everything the page consumes around the calculators.

``forms`` imports Streamlit and is imported explicitly by the app; the other
modules are plain Python and safe to use from tests and scripts.
"""

from .formatting import format_currency, format_number
from .charts import growth_chart, series_frame
from .storage import JsonFileStore, MemoryStore, load_input, save_input

__all__ = [
    "format_currency",
    "format_number",
    "growth_chart",
    "series_frame",
    "JsonFileStore",
    "MemoryStore",
    "load_input",
    "save_input",
]
