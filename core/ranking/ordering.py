"""
Ranking and history orderings.

Both orderings are total: after the primary keys, ties fall back to
report id so equal-score, equal-time reports never swap between calls.
"""
from typing import Iterable, List, Optional

from core.models import ATSReport, User
from core.ranking.grouping import group_by_job_title
from core.utils import parse_timestamp

ALL_BUCKETS = "all"


def _newest_first(reports: Iterable[ATSReport]) -> List[ATSReport]:
    # Stable sorts applied from least to most significant key
    ordered = sorted(reports, key=lambda r: r.id)
    return sorted(ordered, key=lambda r: parse_timestamp(r.created_at), reverse=True)


def rank_reports(reports: Iterable[ATSReport], job_title: Optional[str] = None) -> List[ATSReport]:
    """Leaderboard order: score desc, then newest first, then id asc.

    Args:
        reports: Reports to rank
        job_title: Bucket label to restrict to; None or "all" ranks everything.
            An unknown label yields an empty list.
    """
    reports = list(reports)
    if job_title is not None and job_title != ALL_BUCKETS:
        reports = group_by_job_title(reports).get(job_title, [])

    return sorted(_newest_first(reports), key=lambda r: r.overall_score, reverse=True)


def filter_history(reports: Iterable[ATSReport], viewer: User) -> List[ATSReport]:
    """Reports visible in the viewer's history, newest first.

    Admins see every report; other users only their own.
    """
    if viewer.is_admin:
        visible = list(reports)
    else:
        visible = [r for r in reports if r.user_id == viewer.id]
    return _newest_first(visible)
