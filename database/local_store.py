"""
Local key-value store.

The fallback half of the persistence adapter and the home of the
persisted session. Values are JSON text; any SQLAlchemy or decoding
error is converted to IOFailure, the one storage error that is
allowed to reach the caller.
"""
import json
import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from core.exceptions import IOFailure
from database.database import db_session_scope
from database.models import LocalRecord

logger = logging.getLogger(__name__)


class LocalKeyValueStore:
    """String keys to JSON values, one row per key."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get_raw(self, key: str) -> Optional[str]:
        try:
            with db_session_scope(self.session_factory) as session:
                record = session.execute(
                    select(LocalRecord).where(LocalRecord.key == key)
                ).scalar_one_or_none()
                return record.value if record is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Local storage read failed for key {key}: {e}")
            raise IOFailure(f"Cannot read local storage key '{key}': {e}") from e

    def set_raw(self, key: str, value: str) -> None:
        try:
            with db_session_scope(self.session_factory) as session:
                record = session.get(LocalRecord, key)
                if record is None:
                    session.add(LocalRecord(key=key, value=value))
                else:
                    record.value = value
        except SQLAlchemyError as e:
            logger.error(f"Local storage write failed for key {key}: {e}")
            raise IOFailure(f"Cannot write local storage key '{key}': {e}") from e

    def delete(self, key: str) -> None:
        try:
            with db_session_scope(self.session_factory) as session:
                record = session.get(LocalRecord, key)
                if record is not None:
                    session.delete(record)
        except SQLAlchemyError as e:
            logger.error(f"Local storage delete failed for key {key}: {e}")
            raise IOFailure(f"Cannot delete local storage key '{key}': {e}") from e

    def keys_with_prefix(self, prefix: str) -> List[str]:
        try:
            with db_session_scope(self.session_factory) as session:
                return list(session.execute(
                    select(LocalRecord.key)
                    .where(LocalRecord.key.startswith(prefix, autoescape=True))
                    .order_by(LocalRecord.key)
                ).scalars())
        except SQLAlchemyError as e:
            logger.error(f"Local storage key scan failed for prefix {prefix}: {e}")
            raise IOFailure(f"Cannot list local storage keys '{prefix}*': {e}") from e

    def get_json(self, key: str) -> Optional[Any]:
        raw = self.get_raw(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise IOFailure(f"Corrupt JSON under local storage key '{key}': {e}") from e

    def set_json(self, key: str, value: Any) -> None:
        self.set_raw(key, json.dumps(value))

    def get_documents(self, key: str) -> List[dict]:
        """Read a collection array; a missing key is an empty collection."""
        documents = self.get_json(key)
        if documents is None:
            return []
        if not isinstance(documents, list):
            raise IOFailure(
                f"Local storage key '{key}' holds {type(documents).__name__}, expected a JSON array"
            )
        return documents

    def set_documents(self, key: str, documents: List[dict]) -> None:
        self.set_json(key, documents)
