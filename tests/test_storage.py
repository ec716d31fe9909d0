"""Tests for snapshot persistence."""

import json
import logging

import pytest

from finance_planner.calculators.compound_interest import CompoundInterestInput, TimeUnit
from finance_planner.calculators.emergency_fund import EmergencyFundInput, Profile
from finance_planner.calculators.first_million import FirstMillionInput
from finance_planner.components.storage import (
    COMPOUND_INTEREST_KEY,
    EMERGENCY_FUND_KEY,
    FIRST_MILLION_KEY,
    JsonFileStore,
    MemoryStore,
    load_input,
    save_input,
)


def test_nothing_stored_returns_default():
    default = EmergencyFundInput()
    assert load_input(MemoryStore(), EMERGENCY_FUND_KEY, EmergencyFundInput.from_snapshot, default) is default


def test_memory_store_round_trip():
    store = MemoryStore()
    data = FirstMillionInput(initial_investment=5000.0, annual_interest_rate_pct=9.5, years=12)
    save_input(store, FIRST_MILLION_KEY, data)
    assert json.loads(store.mapping[FIRST_MILLION_KEY])["annualInterestRate"] == 9.5
    assert load_input(store, FIRST_MILLION_KEY, FirstMillionInput.from_snapshot, FirstMillionInput()) == data


def test_json_file_store_creates_directory(tmp_path):
    store = JsonFileStore(tmp_path / "data")
    data = CompoundInterestInput(initial_capital=2500.0, time=18, time_unit=TimeUnit.MONTHS)
    save_input(store, COMPOUND_INTEREST_KEY, data)
    assert (tmp_path / "data" / "compoundInterestData.json").exists()
    loaded = load_input(store, COMPOUND_INTEREST_KEY, CompoundInterestInput.from_snapshot, CompoundInterestInput())
    assert loaded == data


def test_json_file_store_missing_file(tmp_path):
    assert JsonFileStore(tmp_path).read(EMERGENCY_FUND_KEY) is None


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[1, 2, 3]",
        "null",
        '{"monthlyExpenses": 100}',
        '{"monthlyExpenses": "abc", "profile": "clt"}',
        '{"monthlyExpenses": 100, "profile": "retired"}',
    ],
)
def test_malformed_snapshot_falls_back_to_default(text, caplog):
    store = MemoryStore({EMERGENCY_FUND_KEY: text})
    default = EmergencyFundInput()
    with caplog.at_level(logging.WARNING):
        loaded = load_input(store, EMERGENCY_FUND_KEY, EmergencyFundInput.from_snapshot, default)
    assert loaded is default
    assert "emergencyFundData" in caplog.text


def test_out_of_range_values_still_load():
    """Validation, not loading, is responsible for bad values."""
    store = MemoryStore({EMERGENCY_FUND_KEY: '{"monthlyExpenses": -3, "profile": "public"}'})
    loaded = load_input(store, EMERGENCY_FUND_KEY, EmergencyFundInput.from_snapshot, EmergencyFundInput())
    assert loaded == EmergencyFundInput(monthly_expenses=-3.0, profile=Profile.PUBLIC)


def test_overflowing_number_falls_back_to_default(caplog):
    text = (
        '{"initialCapital": 1000, "interestRate": 10, "time": 1e999, '
        '"timeUnit": "anos", "monthlyInvestment": 0, "capitalization": "anual"}'
    )
    store = MemoryStore({COMPOUND_INTEREST_KEY: text})
    default = CompoundInterestInput()
    with caplog.at_level(logging.WARNING):
        loaded = load_input(store, COMPOUND_INTEREST_KEY, CompoundInterestInput.from_snapshot, default)
    assert loaded is default
    assert "compoundInterestData" in caplog.text


def test_undecodable_file_falls_back_to_default(tmp_path, caplog):
    (tmp_path / "emergencyFundData.json").write_bytes(b"\xff\xfe{bad")
    default = EmergencyFundInput()
    with caplog.at_level(logging.WARNING):
        loaded = load_input(JsonFileStore(tmp_path), EMERGENCY_FUND_KEY, EmergencyFundInput.from_snapshot, default)
    assert loaded is default
    assert "emergencyFundData" in caplog.text


def test_unreadable_path_falls_back_to_default(tmp_path, caplog):
    (tmp_path / "millionData.json").mkdir()
    default = FirstMillionInput()
    with caplog.at_level(logging.WARNING):
        loaded = load_input(JsonFileStore(tmp_path), FIRST_MILLION_KEY, FirstMillionInput.from_snapshot, default)
    assert loaded is default
    assert "millionData" in caplog.text
