#!/usr/bin/env python3
"""
Stats endpoints - store-level counts.
"""

from fastapi import APIRouter, Depends

from core.app_context import AppContext
from core.models import User
from ..dependencies import get_context, require_admin
from ..models.responses import StatsResponse

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def get_stats(
    admin: User = Depends(require_admin),
    context: AppContext = Depends(get_context)
):
    """
    Count users and reports in the store.
    """
    stats = context.store.get_stats()
    return StatsResponse(
        user_count=stats.user_count,
        report_count=stats.report_count,
        storage_mode="remote" if context.store.adapter.is_remote_configured else "local"
    )
