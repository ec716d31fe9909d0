"""Emergency fund sizing.

The ideal reserve is a fixed number of months of fixed costs, chosen by how
stable the person's income is:

* public servants – 3 months
* CLT (formal employment) – 6 months
* MEI / self-employed – 12 months

Example
-------

>>> compute(EmergencyFundInput(monthly_expenses=3000, profile=Profile.CLT)).ideal_reserve
18000.0
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .validation import ErrorKind, ValidationResult, collect, ensure_valid, require_positive


class Profile(str, Enum):
    PUBLIC = "public"
    CLT = "clt"
    AUTONOMOUS = "autonomous"


PROFILE_MULTIPLIERS: Dict[Profile, int] = {
    Profile.PUBLIC: 3,
    Profile.CLT: 6,
    Profile.AUTONOMOUS: 12,
}


@dataclass(frozen=True)
class EmergencyFundInput:
    monthly_expenses: float = 0.0
    profile: Profile = Profile.CLT

    def to_snapshot(self) -> dict:
        return {"monthlyExpenses": self.monthly_expenses, "profile": self.profile.value}

    @classmethod
    def from_snapshot(cls, data: dict) -> "EmergencyFundInput":
        return cls(
            monthly_expenses=float(data["monthlyExpenses"]),
            profile=Profile(data["profile"]),
        )


@dataclass(frozen=True)
class EmergencyFundResult:
    ideal_reserve: float


def multiplier(profile: Profile) -> int:
    """Months of expenses to keep for ``profile``; unknown profiles raise ``ValueError``."""
    return PROFILE_MULTIPLIERS[Profile(profile)]


def validate(data: EmergencyFundInput) -> ValidationResult:
    return collect([
        require_positive("monthly_expenses", data.monthly_expenses,
                         ErrorKind.INVALID_AMOUNT, "Informe um valor válido"),
    ])


def compute(data: EmergencyFundInput) -> EmergencyFundResult:
    ensure_valid(validate(data))
    return EmergencyFundResult(ideal_reserve=float(data.monthly_expenses) * multiplier(data.profile))


__all__ = [
    "Profile",
    "PROFILE_MULTIPLIERS",
    "EmergencyFundInput",
    "EmergencyFundResult",
    "multiplier",
    "validate",
    "compute",
]
