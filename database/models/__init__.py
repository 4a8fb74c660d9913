from .base import Base
from .local_record import LocalRecord

__all__ = [
    'Base',
    'LocalRecord',
]
