"""Auth request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    success: bool
    message: str
    data: dict[str, Any] | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class PublicUser(BaseModel):
    username: str
    email: str


class FinancialInfo(BaseModel):
    MonthlyIncome: Any = None
    MonthlyExpend: Any = None
    LoanRequest: Any = None
    OutstandingDebt: Any = None
    TotalAssets: Any = None
    TotalLiabilities: Any = None


class LoginData(BaseModel):
    user: PublicUser
    financial_info: FinancialInfo
    loan_history: list[Any]


class UserProfileData(BaseModel):
    username: str
    email: str
    financial_profile: dict[str, Any]
    cibil_score: int
