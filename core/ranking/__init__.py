"""
Report aggregation and ranking.

- grouping.py: job-title buckets and status counts
- ordering.py: leaderboard ranking and history filtering
- board.py: CandidateBoard, the in-memory collection and status changes
"""

from core.ranking.grouping import (
    DEFAULT_BUCKET,
    bucket_label,
    group_by_job_title,
    job_titles,
    status_breakdown,
)
from core.ranking.ordering import ALL_BUCKETS, filter_history, rank_reports
from core.ranking.board import CandidateBoard

__all__ = [
    'DEFAULT_BUCKET',
    'ALL_BUCKETS',
    'bucket_label',
    'group_by_job_title',
    'job_titles',
    'status_breakdown',
    'rank_reports',
    'filter_history',
    'CandidateBoard',
]
