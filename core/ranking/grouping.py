"""Job-title buckets for the admin leaderboard."""
from typing import Dict, Iterable, List

from core.models import ATSReport, CANDIDATE_STATUSES

DEFAULT_BUCKET = "General Diagnostic"


def bucket_label(job_title: str) -> str:
    """Bucket key for a job title; blank titles share the default bucket."""
    return (job_title or "").strip() or DEFAULT_BUCKET


def group_by_job_title(reports: Iterable[ATSReport]) -> Dict[str, List[ATSReport]]:
    """Partition reports by trimmed job title.

    Keys come out in first-seen order; reports keep their input order
    inside each bucket.
    """
    groups: Dict[str, List[ATSReport]] = {}
    for report in reports:
        groups.setdefault(bucket_label(report.job_title), []).append(report)
    return groups


def job_titles(reports: Iterable[ATSReport]) -> List[str]:
    return list(group_by_job_title(reports).keys())


def status_breakdown(reports: Iterable[ATSReport]) -> Dict[str, int]:
    counts = {status: 0 for status in CANDIDATE_STATUSES}
    for report in reports:
        counts[report.status] += 1
    return counts
