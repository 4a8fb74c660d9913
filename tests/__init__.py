#!/usr/bin/env python3
"""
Test suite for ATS Pro.

All tests run against a throwaway SQLite file and a fake scoring oracle;
no network access is needed:

    python -m pytest tests/ -v

Shared builders for reports and oracle answers live here.
"""

from typing import Optional

from core.models import AnalysisResponse, ATSReport, CategoryScore, CATEGORY_SUBJECTS


def make_analysis(overall_score: float = 78.0, **overrides) -> AnalysisResponse:
    """A schema-valid oracle answer."""
    data = dict(
        overall_score=overall_score,
        matched_skills=["Python", "SQL"],
        missing_skills=["Kubernetes"],
        semantic_analysis="Strong backend profile with limited platform exposure.",
        improvement_tips=[f"Tip {i}" for i in range(1, 6)],
        category_scores=[CategoryScore(subject=s, value=70) for s in CATEGORY_SUBJECTS],
    )
    data.update(overrides)
    return AnalysisResponse(**data)


def make_report(
    report_id: str,
    score: float = 50.0,
    created_at: str = "2026-01-01T00:00:00+00:00",
    user_id: str = "u1",
    job_title: Optional[str] = "Backend Engineer",
    **overrides
) -> ATSReport:
    data = dict(
        id=report_id,
        user_id=user_id,
        user_name=f"User {user_id}",
        job_title=job_title,
        overall_score=score,
        matched_skills=["Python"],
        missing_skills=["Go"],
        semantic_analysis="ok",
        improvement_tips=["a", "b", "c", "d", "e"],
        category_scores=[CategoryScore(subject="Technical Stack", value=60)],
        created_at=created_at,
        resume_content="resume",
        job_description="Backend Engineer\nBuild APIs",
    )
    data.update(overrides)
    return ATSReport(**data)
