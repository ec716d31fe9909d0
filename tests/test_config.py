import logging
from pathlib import Path

import pytest

from finance_planner.config import DEFAULT_DATA_DIR, load_settings
from finance_planner.utils.logging import setup_logging

ENV_VARS = ("FINANCE_PLANNER_DATA_DIR", "FINANCE_PLANNER_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch removes whatever a .env file adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    settings = load_settings(tmp_path / "missing.env")
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.log_level == "INFO"


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("FINANCE_PLANNER_DATA_DIR", str(tmp_path))
    clean_env.setenv("FINANCE_PLANNER_LOG_LEVEL", "debug")
    settings = load_settings(tmp_path / "missing.env")
    assert settings.data_dir == Path(tmp_path)
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        f"FINANCE_PLANNER_DATA_DIR={tmp_path / 'snapshots'}\nFINANCE_PLANNER_LOG_LEVEL=warning\n",
        encoding="utf-8",
    )
    settings = load_settings(env_file)
    assert settings.data_dir == tmp_path / "snapshots"
    assert settings.log_level == "WARNING"


def test_environment_wins_over_dotenv(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("FINANCE_PLANNER_LOG_LEVEL=warning\n", encoding="utf-8")
    clean_env.setenv("FINANCE_PLANNER_LOG_LEVEL", "error")
    assert load_settings(env_file).log_level == "ERROR"


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("WARNING")
        setup_logging("WARNING")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
