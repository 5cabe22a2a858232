"""
Deterministic CIBIL score derivation.

The score is a pure function of the stored profile. It is recomputed on every
read and never persisted, so a policy change applies to all users at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from config import Config
from services.financial_profile import get_loan_history


PAID_STATUS = "paid"


@dataclass(frozen=True)
class ScoringPolicy:
    baseline: int = 650
    increment: int = 5
    ceiling: int = 850

    def __post_init__(self) -> None:
        if self.increment < 0:
            raise ValueError("increment must not be negative")
        if self.ceiling < self.baseline:
            raise ValueError("ceiling must be greater than or equal to baseline")

    @classmethod
    def from_config(cls) -> "ScoringPolicy":
        return cls(
            baseline=Config.CIBIL_BASELINE,
            increment=Config.CIBIL_INCREMENT,
            ceiling=Config.CIBIL_CEILING,
        )


DEFAULT_POLICY = ScoringPolicy()


def count_paid_loans(profile: dict[str, Any] | None) -> int:
    return sum(
        1
        for loan in get_loan_history(profile)
        if isinstance(loan, dict) and loan.get("status") == PAID_STATUS
    )


def calculate_cibil_score(
    profile: dict[str, Any] | None,
    policy: ScoringPolicy | None = None,
) -> int:
    """
    Score a profile: baseline plus a fixed increment per paid loan, capped at the ceiling.

    A profile without a loan history scores the baseline.
    """
    policy = policy or DEFAULT_POLICY
    score = policy.baseline + policy.increment * count_paid_loans(profile)
    return min(score, policy.ceiling)
