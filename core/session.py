"""
Session state - one SessionContext per client token.

SessionRegistry is owned by AppContext. Each login or registration opens
a new token; every SessionContext writes its auth state (plaintext
password included) to the local store under "<session_key>_<token>"
after each change, so a restart rehydrates every open session.
"""
import logging
import secrets
import threading
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from core.exceptions import IOFailure
from core.models import AuthState, User
from database.local_store import LocalKeyValueStore
from database.repository import AtsRepository

logger = logging.getLogger(__name__)


class SessionContext:
    """Tracks one client's authenticated user and persists its auth state."""

    def __init__(
        self,
        store: AtsRepository,
        local_store: LocalKeyValueStore,
        session_key: str = "auth",
        token: Optional[str] = None,
    ):
        self.store = store
        self.local_store = local_store
        self.session_key = session_key
        self.token = token
        self._state = AuthState()
        self._lock = threading.Lock()

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def current_user(self) -> Optional[User]:
        return self._state.user

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    def rehydrate(self) -> AuthState:
        """Load the persisted auth state; absent state means logged out.

        Raises:
            IOFailure: If the stored session cannot be read or decoded
        """
        document = self.local_store.get_json(self.session_key)
        if document is None:
            return self._state

        try:
            state = AuthState.model_validate(document)
        except PydanticValidationError as e:
            raise IOFailure(f"Corrupt session under local storage key '{self.session_key}': {e}") from e

        with self._lock:
            self._state = state
        return state

    def login(self, user: User) -> AuthState:
        return self._set_state(AuthState(user=user, is_authenticated=True))

    def logout(self) -> AuthState:
        return self._set_state(AuthState())

    def register(self, user: User) -> AuthState:
        self.store.save_user(user)
        return self.login(user)

    def update_current_user(self, user: User) -> AuthState:
        """Refresh the session copy after a profile edit of the logged-in user."""
        if self._state.user is None or self._state.user.id != user.id:
            return self._state
        return self._set_state(AuthState(user=user, is_authenticated=True))

    def _set_state(self, state: AuthState) -> AuthState:
        with self._lock:
            self._state = state
            self.local_store.set_json(self.session_key, state.to_document())
        return state


class SessionRegistry:
    """Open client sessions by token."""

    def __init__(self, store: AtsRepository, local_store: LocalKeyValueStore, session_key: str = "auth"):
        self.store = store
        self.local_store = local_store
        self.session_key = session_key
        self._sessions: Dict[str, SessionContext] = {}
        self._lock = threading.Lock()

    def _key_prefix(self) -> str:
        return f"{self.session_key}_"

    def _context_for(self, token: str) -> SessionContext:
        return SessionContext(
            self.store,
            self.local_store,
            session_key=f"{self._key_prefix()}{token}",
            token=token,
        )

    def create(self) -> SessionContext:
        """New logged-out session under a fresh token; tracked once authenticated."""
        token = secrets.token_hex(16)
        session = self._context_for(token)
        with self._lock:
            self._sessions[token] = session
        return session

    def get(self, token: Optional[str]) -> Optional[SessionContext]:
        """Authenticated session for token, or None."""
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
        if session is None or not session.is_authenticated:
            return None
        return session

    def close(self, token: Optional[str]) -> AuthState:
        """Log the token's session out and drop its persisted state."""
        if not token:
            return AuthState()
        with self._lock:
            session = self._sessions.pop(token, None)
        if session is None:
            return AuthState()

        state = session.logout()
        self.local_store.delete(session.session_key)
        return state

    def refresh_user(self, user: User) -> None:
        """Carry a profile edit into every open session of that user."""
        for session in self.sessions():
            session.update_current_user(user)

    def sessions(self) -> List[SessionContext]:
        with self._lock:
            return list(self._sessions.values())

    def rehydrate(self) -> int:
        """Restore every persisted authenticated session.

        Raises:
            IOFailure: If a stored session cannot be read or decoded
        """
        restored: Dict[str, SessionContext] = {}
        prefix = self._key_prefix()
        for key in self.local_store.keys_with_prefix(prefix):
            token = key[len(prefix):]
            session = self._context_for(token)
            if session.rehydrate().is_authenticated:
                restored[token] = session

        with self._lock:
            self._sessions = restored
        logger.info(f"Restored {len(restored)} sessions")
        return len(restored)
