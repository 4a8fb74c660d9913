#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from core.models import ATSReport, Role, User


class UserSummary(BaseModel):
    """User without credentials."""
    id: str
    email: str
    name: str
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(id=user.id, email=user.email, name=user.name, role=user.role)


class SessionResponse(BaseModel):
    success: bool = True
    is_authenticated: bool
    user: Optional[UserSummary] = None
    token: Optional[str] = Field(default=None, description="Bearer token, returned on login and register")


class ProfileResponse(BaseModel):
    success: bool = True
    user: UserSummary


class ReportResponse(BaseModel):
    success: bool = True
    report: ATSReport


class ReportsResponse(BaseModel):
    success: bool = True
    count: int
    reports: List[ATSReport]


class RankedReport(BaseModel):
    """Leaderboard row; rank starts at 1."""
    rank: int
    report: ATSReport


class LeaderboardResponse(BaseModel):
    success: bool = True
    job_title: str = Field(description="Selected bucket, or 'all'")
    count: int
    entries: List[RankedReport]


class JobTitlesResponse(BaseModel):
    success: bool = True
    job_titles: List[str]
    counts: Dict[str, int]


class InsightsResponse(BaseModel):
    success: bool = True
    total_reports: int
    status_counts: Dict[str, int]
    bucket_counts: Dict[str, int]
    average_score: Optional[float] = None


class StatsResponse(BaseModel):
    success: bool = True
    user_count: int
    report_count: int
    storage_mode: str = Field(description="'remote' or 'local'")


class HealthResponse(BaseModel):
    status: str
    service: str = "ats-pro-web"
    error: Optional[str] = None
