#!/usr/bin/env python3
"""
Report endpoints - run analyses and view history.
"""

import logging
from fastapi import APIRouter, Depends, File, Form, UploadFile

from core.app_context import AppContext
from core.models import User
from core.ranking import filter_history
from ..dependencies import get_context, get_current_user
from ..models.requests import AnalyzeRequest
from ..models.responses import ReportResponse, ReportsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.post("/analyze", response_model=ReportResponse)
def analyze(
    request: AnalyzeRequest,
    user: User = Depends(get_current_user),
    context: AppContext = Depends(get_context)
):
    """
    Score pasted resume text against a job description.

    The new report is stored with status 'pending'.
    """
    report = context.analysis_service.analyze(user, request.resume_text, request.job_description)
    return ReportResponse(report=report)


@router.post("/upload", response_model=ReportResponse)
def analyze_upload(
    file: UploadFile = File(..., description="Resume as PDF, DOCX or TXT"),
    job_description: str = Form(...),
    user: User = Depends(get_current_user),
    context: AppContext = Depends(get_context)
):
    """
    Extract text from an uploaded resume and score it.
    """
    # One byte past the limit is enough for the parser to reject it
    data = file.file.read(context.config.analysis.max_file_size_bytes + 1)
    report = context.analysis_service.analyze_document(
        user,
        file.filename or "",
        data,
        job_description
    )
    return ReportResponse(report=report)


@router.get("/history", response_model=ReportsResponse)
def get_history(
    user: User = Depends(get_current_user),
    context: AppContext = Depends(get_context)
):
    """
    Reports visible to the current user, newest first.

    Admins see every submission; other users only their own.
    """
    reports = filter_history(context.board.reports, user)
    return ReportsResponse(count=len(reports), reports=reports)
