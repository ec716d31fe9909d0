from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_DIR = BASE_DIR / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """
    Reads settings from .env/environment variables, falling back to defaults.
    """
    load_dotenv(env_file)  # loads .env into env vars; existing variables win

    data_dir = os.getenv("FINANCE_PLANNER_DATA_DIR") or str(DEFAULT_DATA_DIR)
    log_level = os.getenv("FINANCE_PLANNER_LOG_LEVEL") or "INFO"
    return Settings(data_dir=Path(data_dir), log_level=log_level.upper())
