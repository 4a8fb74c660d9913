#!/usr/bin/env python3
"""
Auth endpoints - login, registration, logout and profile edits.

Login and register open a new client session and return its token, both
in the body and as the session cookie.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response

from core.app_context import AppContext
from core.models import AuthState, User
from core.session import SessionContext
from ..dependencies import (
    SESSION_COOKIE,
    get_context,
    get_current_user,
    get_session,
    get_session_token,
)
from ..models.requests import LoginRequest, RegisterRequest, ProfileUpdate
from ..models.responses import SessionResponse, ProfileResponse, UserSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _session_response(state: AuthState, token: Optional[str] = None) -> SessionResponse:
    return SessionResponse(
        is_authenticated=state.is_authenticated,
        user=UserSummary.from_user(state.user) if state.user else None,
        token=token
    )


def _open_session(response: Response, session: SessionContext) -> SessionResponse:
    response.set_cookie(SESSION_COOKIE, session.token, httponly=True, samesite="lax")
    return _session_response(session.state, token=session.token)


@router.get("/session", response_model=SessionResponse)
def get_session_state(session: Optional[SessionContext] = Depends(get_session)):
    """Authentication state of the calling client."""
    if session is None:
        return _session_response(AuthState())
    return _session_response(session.state)


@router.post("/login", response_model=SessionResponse)
def login(request: LoginRequest, response: Response, context: AppContext = Depends(get_context)):
    session = context.account_service.login(request.email, request.password)
    return _open_session(response, session)


@router.post("/register", response_model=SessionResponse)
def register(request: RegisterRequest, response: Response, context: AppContext = Depends(get_context)):
    """
    Register a new account and log it in.

    Emails are unique regardless of case.
    """
    session = context.account_service.register(
        email=request.email,
        password=request.password,
        name=request.name,
        role=request.role
    )
    return _open_session(response, session)


@router.post("/logout", response_model=SessionResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    context: AppContext = Depends(get_context)
):
    """End the calling client's session only."""
    state = context.account_service.logout(token)
    response.delete_cookie(SESSION_COOKIE)
    return _session_response(state)


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    request: ProfileUpdate,
    user: User = Depends(get_current_user),
    context: AppContext = Depends(get_context)
):
    updated = context.account_service.update_profile(user, name=request.name, email=request.email)
    return ProfileResponse(user=UserSummary.from_user(updated))
