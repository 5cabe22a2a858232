"""
Read-side projections of a stored financial profile.

Uploads in the wild mix PascalCase and camelCase keys (``MonthlyIncome`` next
to ``outstandingDebt``), so each field is looked up under both spellings.
Absent fields come back as None, never as an error.
"""

from __future__ import annotations

from typing import Any


SUMMARY_FIELDS = (
    "MonthlyIncome",
    "MonthlyExpend",
    "LoanRequest",
    "OutstandingDebt",
    "TotalAssets",
    "TotalLiabilities",
)


def _aliases(field: str) -> tuple[str, str]:
    return field, field[0].lower() + field[1:]


def read_field(profile: dict[str, Any] | None, field: str) -> Any:
    """Return a profile field under its PascalCase or camelCase key, else None."""
    if not profile:
        return None
    for key in _aliases(field):
        if key in profile:
            return profile[key]
    return None


def get_loan_history(profile: dict[str, Any] | None) -> list[Any]:
    history = read_field(profile, "LoanHistory")
    return list(history) if isinstance(history, list) else []


def financial_summary(profile: dict[str, Any] | None) -> dict[str, Any]:
    """Project the scalar financial fields shown to a user after login."""
    return {field: read_field(profile, field) for field in SUMMARY_FIELDS}
