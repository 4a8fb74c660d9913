from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.report import ReportRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'ReportRepository',
]
