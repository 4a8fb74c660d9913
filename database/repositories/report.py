from typing import List

from core.models import ATSReport
from core.utils import parse_timestamp
from database.repositories.base import BaseRepository


class ReportRepository(BaseRepository):
    collection = 'reports'

    def get_reports(self) -> List[ATSReport]:
        """All reports, newest first."""
        reports = self._find_all(ATSReport)
        return sorted(reports, key=lambda r: parse_timestamp(r.created_at), reverse=True)

    def save_report(self, report: ATSReport) -> None:
        """Insert a new report. Never call twice for the same id."""
        self.adapter.execute('insertOne', self.collection, {
            'document': report.to_document(),
        })

    def update_report(self, report: ATSReport) -> None:
        """Overwrite an existing report's fields; does not upsert."""
        self.adapter.execute('updateOne', self.collection, {
            'filter': {'id': report.id},
            'update': {'$set': report.to_document()},
        })

    def count(self) -> int:
        return self._count()
