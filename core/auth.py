"""
Credential checks and registration input validation.

Passwords are compared in plaintext. verify_password is the only place
credentials are compared, so introducing hashing changes one function.
Validation helpers return a user-facing message instead of raising.
"""
import re
from typing import Iterable, Optional

from core.models import Role, User
from core.utils import random_id

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MIN_PASSWORD_LENGTH = 6


def verify_password(stored: Optional[str], supplied: str) -> bool:
    return stored is not None and stored == supplied


def validate_email(email: str) -> Optional[str]:
    if re.match(r"^\d", email):
        return "INVALID EMAIL: Email ID should not start with a number."

    if not EMAIL_PATTERN.search(email):
        return "INVALID ENTRY: Please provide a standard email format."

    return None


def validate_credentials(
    email: str,
    password: str,
    name: Optional[str] = None,
    registering: bool = False,
) -> Optional[str]:
    """Return an error message for malformed input, or None if it is acceptable."""
    email_error = validate_email(email)
    if email_error:
        return email_error

    if len(password) < MIN_PASSWORD_LENGTH:
        return f"SECURITY REQUIREMENT: Password must be at least {MIN_PASSWORD_LENGTH} characters."

    if registering and not (name or "").strip():
        return "PROFILE INCOMPLETE: Name is required for registration."

    return None


def is_email_taken(users: Iterable[User], email: str, exclude_id: Optional[str] = None) -> bool:
    wanted = email.lower()
    return any(u.email.lower() == wanted and u.id != exclude_id for u in users)


def authenticate(users: Iterable[User], email: str, password: str) -> Optional[User]:
    """Find the user with this email (case-insensitive) and a matching password."""
    wanted = email.lower()
    for user in users:
        if user.email.lower() == wanted and verify_password(user.password, password):
            return user
    return None


def new_user(email: str, password: str, name: str, role: Role = "user") -> User:
    return User(id=random_id(), email=email, password=password, name=name, role=role)
