"""
Account service - login, registration and profile edits against the
domain store, reflected into the client's session.

Input problems are reported as ValidationError carrying the message to
display; the HTTP layer turns them into 400 responses.
"""
import logging
from typing import Optional

from core import auth
from core.exceptions import ValidationError
from core.models import AuthState, Role, User
from core.session import SessionContext, SessionRegistry
from database.repository import AtsRepository

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, store: AtsRepository, sessions: SessionRegistry):
        self.store = store
        self.sessions = sessions

    def login(self, email: str, password: str) -> SessionContext:
        """Check credentials and open a new session for the user."""
        error = auth.validate_credentials(email, password)
        if error:
            raise ValidationError(error)

        user = auth.authenticate(self.store.get_users(), email, password)
        if user is None:
            logger.info(f"Failed login for {email}")
            raise ValidationError("CREDENTIAL MISMATCH: The provided information is incorrect.")

        session = self.sessions.create()
        session.login(user)
        logger.info(f"User {user.id} logged in")
        return session

    def register(self, email: str, password: str, name: str, role: Role = "user") -> SessionContext:
        error = auth.validate_credentials(email, password, name=name, registering=True)
        if error:
            raise ValidationError(error)

        if auth.is_email_taken(self.store.get_users(), email):
            raise ValidationError("IDENTITY CONFLICT: This email address is already registered.")

        user = auth.new_user(email=email, password=password, name=name.strip(), role=role)
        session = self.sessions.create()
        session.register(user)
        logger.info(f"Registered {role} {user.id}")
        return session

    def logout(self, token: Optional[str]) -> AuthState:
        return self.sessions.close(token)

    def update_profile(self, current: User, name: Optional[str] = None, email: Optional[str] = None) -> User:
        """Edit a logged-in user's name and/or email.

        Raises:
            ValidationError: If the new values are malformed or the email is taken
        """
        changes = {}
        if name is not None:
            if not name.strip():
                raise ValidationError("PROFILE INCOMPLETE: Name is required.")
            changes["name"] = name.strip()

        if email is not None:
            error = auth.validate_email(email)
            if error:
                raise ValidationError(error)
            if auth.is_email_taken(self.store.get_users(), email, exclude_id=current.id):
                raise ValidationError("IDENTITY CONFLICT: This email address is already registered.")
            changes["email"] = email

        updated = current.model_copy(update=changes)
        self.store.save_user(updated)
        self.sessions.refresh_user(updated)
        return updated
