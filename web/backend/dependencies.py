#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The AppContext lives on app.state; every request resolves it from there
instead of from a module-level global. Clients identify their session
with an "Authorization: Bearer <token>" header or the session cookie.
"""

from typing import Optional
from fastapi import Cookie, Depends, Header, Request

from core.app_context import AppContext
from core.exceptions import Forbidden, NotAuthenticated
from core.models import User
from core.session import SessionContext
from .exceptions import ServiceUnavailable

SESSION_COOKIE = "ats_session"


def get_context(request: Request) -> AppContext:
    """
    FastAPI dependency that yields the initialized application context.

    Raises:
        ServiceUnavailable: If startup could not initialize storage.
    """
    context: AppContext = request.app.state.context
    if not context.ready:
        raise ServiceUnavailable(
            f"Cannot initialize: {context.init_error or 'storage not ready'}"
        )
    return context


def get_session_token(
    authorization: Optional[str] = Header(default=None),
    ats_session: Optional[str] = Cookie(default=None)
) -> Optional[str]:
    """Bearer token from the Authorization header, else the session cookie."""
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip() or None
    return ats_session


def get_session(
    token: Optional[str] = Depends(get_session_token),
    context: AppContext = Depends(get_context)
) -> Optional[SessionContext]:
    return context.sessions.get(token)


def get_current_user(session: Optional[SessionContext] = Depends(get_session)) -> User:
    if session is None or session.current_user is None:
        raise NotAuthenticated("Login required")
    return session.current_user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise Forbidden("Admin access required")
    return user
