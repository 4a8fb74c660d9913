#!/usr/bin/env python3
"""
Admin endpoints - candidate ranking and status decisions.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.app_context import AppContext
from core.models import User
from core.ranking import (
    ALL_BUCKETS,
    group_by_job_title,
    rank_reports,
    status_breakdown,
)
from ..dependencies import get_context, require_admin
from ..models.requests import StatusUpdate
from ..models.responses import (
    InsightsResponse,
    JobTitlesResponse,
    LeaderboardResponse,
    RankedReport,
    ReportResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/leaderboard", response_model=LeaderboardResponse)
def get_leaderboard(
    job_title: Optional[str] = Query(default=None, description="Job title bucket, or 'all'"),
    admin: User = Depends(require_admin),
    context: AppContext = Depends(get_context)
):
    """
    Candidates ranked by overall score (highest first).

    Ties go to the most recent report.
    """
    ranked = rank_reports(context.board.reports, job_title)
    return LeaderboardResponse(
        job_title=job_title or ALL_BUCKETS,
        count=len(ranked),
        entries=[RankedReport(rank=i + 1, report=r) for i, r in enumerate(ranked)]
    )


@router.get("/job-titles", response_model=JobTitlesResponse)
def get_job_titles(
    admin: User = Depends(require_admin),
    context: AppContext = Depends(get_context)
):
    """Job title buckets in first-seen order."""
    groups = group_by_job_title(context.board.reports)
    return JobTitlesResponse(
        job_titles=list(groups.keys()),
        counts={title: len(reports) for title, reports in groups.items()}
    )


@router.put("/reports/{report_id}/status", response_model=ReportResponse)
def update_status(
    report_id: str,
    request: StatusUpdate,
    admin: User = Depends(require_admin),
    context: AppContext = Depends(get_context)
):
    """Set a candidate's status. Any status may follow any other."""
    report = context.board.apply_status_change(report_id, request.status)
    return ReportResponse(report=report)


@router.get("/insights", response_model=InsightsResponse)
def get_insights(
    admin: User = Depends(require_admin),
    context: AppContext = Depends(get_context)
):
    """Status counts, bucket sizes and average score."""
    reports = context.board.reports
    groups = group_by_job_title(reports)
    average = sum(r.overall_score for r in reports) / len(reports) if reports else None
    return InsightsResponse(
        total_reports=len(reports),
        status_counts=status_breakdown(reports),
        bucket_counts={title: len(items) for title, items in groups.items()},
        average_score=round(average, 1) if average is not None else None
    )
