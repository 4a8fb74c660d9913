"""
Persistence adapter - remote data API with transparent local fallback.

execute(action, collection, payload) mirrors the data API contract
(find / insertOne / updateOne). When the remote endpoint is configured
it is tried first; an Unavailable result selects the local key-value
store instead. Local read-modify-write sequences run under a
per-collection lock.
"""
import itertools
import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from database.local_store import LocalKeyValueStore
from database.remote import DataApiClient, Ok, RemoteResult, Unavailable

logger = logging.getLogger(__name__)

FIND = "find"
INSERT_ONE = "insertOne"
UPDATE_ONE = "updateOne"

ACTIONS = (FIND, INSERT_ONE, UPDATE_ONE)

# Key each action's response body must carry to count as well-formed
_RESPONSE_KEYS = {
    FIND: "documents",
    INSERT_ONE: "insertedId",
    UPDATE_ONE: "modifiedCount",
}


class PersistenceAdapter:
    """Named-collection find/insert/update over remote-or-local storage."""

    def __init__(
        self,
        local_store: LocalKeyValueStore,
        remote_client: Optional[DataApiClient] = None,
        key_prefix: str = "ats_db",
        clock: Callable[[], float] = time.time,
    ):
        self.local_store = local_store
        self.remote_client = remote_client
        self.key_prefix = key_prefix
        self._clock = clock
        self._id_counter = itertools.count(1)
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def is_remote_configured(self) -> bool:
        return self.remote_client is not None and self.remote_client.is_configured

    def collection_key(self, collection: str) -> str:
        return f"{self.key_prefix}_{collection}"

    def execute(self, action: str, collection: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run one data API action and return its response body.

        Raises:
            ValueError: If action is not find, insertOne or updateOne
            IOFailure: If the local store cannot be read or written
        """
        if action not in ACTIONS:
            raise ValueError(f"Unsupported action: {action}. Supported actions: {', '.join(ACTIONS)}")

        payload = payload or {}

        if self.is_remote_configured:
            result = self._validate_remote(action, self.remote_client.execute(action, collection, payload))
            if isinstance(result, Ok):
                return result.data
            logger.warning(
                f"[Database] Remote {action} on '{collection}' failed, falling back to local storage: {result.reason}"
            )

        return self._execute_local(action, collection, payload)

    def init(self) -> None:
        if not self.is_remote_configured:
            logger.info("Local storage mode active (remote data API not configured)")
        else:
            logger.info(f"Remote data API mode active: {self.remote_client.config.endpoint}")

    @staticmethod
    def _validate_remote(action: str, result: RemoteResult) -> RemoteResult:
        if isinstance(result, Unavailable):
            return result

        expected = _RESPONSE_KEYS[action]
        if expected not in result.data:
            return Unavailable(f"{action} response missing '{expected}'")
        if action == FIND and not isinstance(result.data[expected], list):
            return Unavailable(f"{action} response '{expected}' is not a list")
        return result

    def _lock_for(self, collection: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = threading.Lock()
                self._locks[collection] = lock
            return lock

    def _execute_local(self, action: str, collection: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        key = self.collection_key(collection)

        with self._lock_for(collection):
            documents = self.local_store.get_documents(key)

            if action == FIND:
                return {"documents": documents}

            if action == INSERT_ONE:
                documents.append(payload["document"])
                self.local_store.set_documents(key, documents)
                return {"insertedId": self._next_local_id()}

            modified = self._apply_update(documents, payload)
            self.local_store.set_documents(key, documents)
            return {"modifiedCount": modified}

    @staticmethod
    def _apply_update(documents: List[dict], payload: Dict[str, Any]) -> int:
        """Shallow-merge update fields into the document matched by filter.id."""
        target_id = (payload.get("filter") or {}).get("id")
        update = payload.get("update") or {}
        fields = update.get("$set", update)

        for index, document in enumerate(documents):
            if isinstance(document, dict) and document.get("id") == target_id:
                documents[index] = {**document, **fields}
                return 1

        if payload.get("upsert"):
            documents.append(dict(fields))
            return 1

        return 0

    def _next_local_id(self) -> str:
        return f"local-{int(self._clock() * 1000)}-{next(self._id_counter)}"
