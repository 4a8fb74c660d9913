#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional

from core.models import CandidateStatus, Role


class LoginRequest(BaseModel):
    """Credentials for login."""
    email: str = Field(..., description="Account email (case-insensitive)")
    password: str = Field(..., description="Account password")


class RegisterRequest(BaseModel):
    """New account details."""
    email: str
    password: str
    name: str
    role: Role = Field(default="user", description="'admin' registers a recruiter account")


class ProfileUpdate(BaseModel):
    """Edit of the logged-in user's profile; omitted fields are unchanged."""
    name: Optional[str] = None
    email: Optional[str] = None


class AnalyzeRequest(BaseModel):
    """Resume text and job description to score."""
    resume_text: str = Field(..., description="Plain resume text")
    job_description: str = Field(..., description="Target job description; its first line becomes the job title")


class StatusUpdate(BaseModel):
    """Admin decision for a candidate report."""
    status: CandidateStatus
