import logging
from typing import List, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from core.models import DocumentModel
from database.adapter import PersistenceAdapter

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=DocumentModel)


class BaseRepository:
    collection: str = ""

    def __init__(self, adapter: PersistenceAdapter):
        self.adapter = adapter

    def _find_all(self, model: Type[ModelT]) -> List[ModelT]:
        data = self.adapter.execute('find', self.collection)
        items = []
        for document in data.get('documents') or []:
            try:
                items.append(model.model_validate(document))
            except PydanticValidationError as e:
                doc_id = document.get('id') if isinstance(document, dict) else None
                logger.warning(f"Skipping malformed {self.collection} document {doc_id}: {e}")
        return items

    def _count(self) -> int:
        """Number of stored documents, malformed ones included."""
        data = self.adapter.execute('find', self.collection)
        return len(data.get('documents') or [])
