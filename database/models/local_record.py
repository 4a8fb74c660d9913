from sqlalchemy import Column, String, Text, TIMESTAMP, func

from .base import Base


class LocalRecord(Base):
    """One key of the local key-value store.

    Collection keys ("<prefix>_<collection>") hold a JSON array of full
    documents; the session key holds the serialized auth state.
    """
    __tablename__ = 'local_records'

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
