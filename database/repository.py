import logging
from dataclasses import dataclass
from typing import List

from core.models import ATSReport, User
from database.adapter import PersistenceAdapter
from database.repositories import ReportRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreStats:
    user_count: int
    report_count: int


class AtsRepository:
    """Domain store: users and reports over the persistence adapter.

    Callers own the report invariants: save_report once per id, and
    update_report only with a record whose non-status fields are unchanged.
    """

    def __init__(self, adapter: PersistenceAdapter):
        self.adapter = adapter
        self.users = UserRepository(adapter)
        self.reports = ReportRepository(adapter)

    def init(self) -> None:
        self.adapter.init()

    def get_users(self) -> List[User]:
        return self.users.get_users()

    def save_user(self, user: User) -> None:
        self.users.save_user(user)

    def get_reports(self) -> List[ATSReport]:
        return self.reports.get_reports()

    def save_report(self, report: ATSReport) -> None:
        self.reports.save_report(report)

    def update_report(self, report: ATSReport) -> None:
        self.reports.update_report(report)

    def get_stats(self) -> StoreStats:
        stats = StoreStats(user_count=self.users.count(), report_count=self.reports.count())
        logger.debug(f"Store stats: {stats}")
        return stats
