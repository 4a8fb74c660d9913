"""
Candidate board - the in-memory report collection behind the admin and
history views, kept in step with the domain store.
"""
import logging
import threading
from typing import List, Optional

from core.exceptions import ReportNotFound, ValidationError
from core.models import ATSReport, CANDIDATE_STATUSES, CandidateStatus
from database.repository import AtsRepository

logger = logging.getLogger(__name__)


class CandidateBoard:
    """Holds loaded reports and applies admin status decisions."""

    def __init__(self, store: AtsRepository, reports: Optional[List[ATSReport]] = None):
        self.store = store
        self._reports: List[ATSReport] = list(reports) if reports is not None else []
        self._lock = threading.Lock()

    @property
    def reports(self) -> List[ATSReport]:
        with self._lock:
            return list(self._reports)

    def reload(self) -> List[ATSReport]:
        reports = self.store.get_reports()
        with self._lock:
            self._reports = reports
        logger.info(f"Loaded {len(reports)} reports")
        return list(reports)

    def get(self, report_id: str) -> ATSReport:
        with self._lock:
            for report in self._reports:
                if report.id == report_id:
                    return report
        raise ReportNotFound(f"Report {report_id} not found")

    def add_report(self, report: ATSReport) -> ATSReport:
        """Persist a newly analysed report and put it at the head of the list."""
        self.store.save_report(report)
        with self._lock:
            self._reports.insert(0, report)
        return report

    def apply_status_change(self, report_id: str, new_status: CandidateStatus) -> ATSReport:
        """Move a report to new_status; every other field is carried over unchanged.

        Any status may follow any other, including a return to pending.

        Raises:
            ValidationError: If new_status is not a candidate status
            ReportNotFound: If no loaded report has report_id
        """
        if new_status not in CANDIDATE_STATUSES:
            raise ValidationError(f"Unknown status '{new_status}'. Use one of: {', '.join(CANDIDATE_STATUSES)}")

        current = self.get(report_id)
        updated = current.model_copy(update={"status": new_status})
        self.store.update_report(updated)

        with self._lock:
            self._reports = [updated if r.id == report_id else r for r in self._reports]

        logger.info(f"Report {report_id} status {current.status} -> {new_status}")
        return updated
