"""Snapshot persistence for calculator inputs.

Each calculator keeps one JSON snapshot under a fixed key.  The calculators
never touch storage: the page loads a snapshot once at startup and saves the
input after every successful computation through :func:`load_input` and
:func:`save_input`.

A snapshot that cannot be read back (unreadable file, bad JSON, missing keys,
unknown enum tokens, ...) counts as "no prior state": it is logged and the
default input is used instead.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, MutableMapping, Optional, Protocol, TypeVar

from ..utils.logging import get_logger

logger = get_logger(__name__)

EMERGENCY_FUND_KEY = "emergencyFundData"
FIRST_MILLION_KEY = "millionData"
COMPOUND_INTEREST_KEY = "compoundInterestData"

T = TypeVar("T")


class SnapshotStore(Protocol):
    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, text: str) -> None:
        ...


class JsonFileStore:
    """One ``<key>.json`` file per calculator inside ``directory``."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def write(self, key: str, text: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self._path(key), "w", encoding="utf-8") as f:
            f.write(text)


class MemoryStore:
    """Keeps snapshots in a mapping (a plain dict, or ``st.session_state``)."""

    def __init__(self, mapping: Optional[MutableMapping[str, str]] = None):
        self.mapping = mapping if mapping is not None else {}

    def read(self, key: str) -> Optional[str]:
        return self.mapping.get(key)

    def write(self, key: str, text: str) -> None:
        self.mapping[key] = text


def load_input(store: SnapshotStore, key: str, parser: Callable[[dict], T], default: T) -> T:
    try:
        text = store.read(key)
        if text is None:
            return default
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return parser(data)
    except (OSError, ValueError, TypeError, KeyError, OverflowError) as exc:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors; int(inf) overflows
        logger.warning("Discarding malformed snapshot %r: %s", key, exc)
        return default


def save_input(store: SnapshotStore, key: str, record) -> None:
    store.write(key, json.dumps(record.to_snapshot(), indent=2))
    logger.debug("Saved snapshot %r", key)


__all__ = [
    "EMERGENCY_FUND_KEY",
    "FIRST_MILLION_KEY",
    "COMPOUND_INTEREST_KEY",
    "SnapshotStore",
    "JsonFileStore",
    "MemoryStore",
    "load_input",
    "save_input",
]
