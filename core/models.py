#!/usr/bin/env python3
"""
Domain models for users, ATS reports and session state.

Documents are stored and exchanged with camelCase field names
(userId, overallScore, ...). Models accept either spelling and are
frozen: changes go through model_copy(update=...).
"""
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Role = Literal["user", "admin"]
CandidateStatus = Literal["pending", "shortlisted", "rejected", "interviewing"]

CANDIDATE_STATUSES: List[str] = ["pending", "shortlisted", "rejected", "interviewing"]

CATEGORY_SUBJECTS: List[str] = [
    "Technical Stack",
    "Soft Skills",
    "Experience Rank",
    "Education Match",
    "Keyword Density",
]


class DocumentModel(BaseModel):
    """Base for models persisted as camelCase JSON documents."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class User(DocumentModel):
    id: str
    email: str
    password: Optional[str] = None
    name: str
    role: Role = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class CategoryScore(DocumentModel):
    """One radar-chart axis. The oracle names the value field "A"."""
    subject: str
    value: float = Field(
        ge=0,
        le=100,
        validation_alias=AliasChoices("value", "A"),
    )
    full_mark: float = 100


class AnalysisResponse(DocumentModel):
    """Validated scoring oracle output."""
    model_config = ConfigDict(extra="ignore")

    overall_score: float = Field(ge=0, le=100)
    matched_skills: List[str]
    missing_skills: List[str]
    semantic_analysis: str
    improvement_tips: List[str]
    category_scores: List[CategoryScore]


class ATSReport(DocumentModel):
    id: str
    user_id: str
    user_name: str
    job_title: Optional[str] = ""
    overall_score: float = Field(ge=0, le=100)
    matched_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    semantic_analysis: str = ""
    improvement_tips: List[str] = Field(default_factory=list)
    category_scores: List[CategoryScore] = Field(default_factory=list)
    created_at: str
    resume_content: str = ""
    job_description: str = ""
    status: CandidateStatus = "pending"


class AuthState(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user: Optional[User] = None
    is_authenticated: bool = Field(default=False, alias="isAuthenticated")

    def to_document(self) -> dict:
        return {
            "user": self.user.to_document() if self.user else None,
            "isAuthenticated": self.is_authenticated,
        }
