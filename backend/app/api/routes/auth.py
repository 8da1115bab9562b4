"""Passkey Auth — login, logout and current-session lookup.

Invariants:
    - Login succeeds only for passkeys present in the injected PasskeyTable
    - A successful login opens exactly one AuthSession and returns its token
    - Logout closes the caller's session; the token is unusable afterwards

Design Decisions:
    - The user row is created on first login for a username (get_or_create_user)
    - Failed logins log at WARNING without the attempted passkey
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status

from app.core.auth_sessions import AuthSession, PasskeyTable, SessionRegistry
from app.core.errors import AuthenticationError
from app.api.dependencies import (
    get_passkey_table, get_session_registry, get_storage, require_session,
)
from app.schemas.auth import LoginRequest, LoginResponse, MeResponse
from app.services.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    passkeys: PasskeyTable = Depends(get_passkey_table),
    registry: SessionRegistry = Depends(get_session_registry),
    storage: Storage = Depends(get_storage),
):
    """Exchange a passkey for a session token."""
    username = passkeys.resolve(body.passkey)
    if username is None:
        logger.warning("Rejected login with unknown passkey")
        raise AuthenticationError("Invalid passkey", "INVALID_PASSKEY")

    user = await storage.get_or_create_user(username)
    session = registry.open(username, user.id, datetime.now(timezone.utc))
    logger.info(f"{username} logged in", extra={"username": username})
    return LoginResponse(
        token=session.token,
        username=session.username,
        user_id=session.user_id,
        expires_at=session.expires_at,
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    session: AuthSession = Depends(require_session),
    registry: SessionRegistry = Depends(get_session_registry),
):
    registry.close(session.token)
    logger.info(f"{session.username} logged out", extra={"username": session.username})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=MeResponse)
async def me(session: AuthSession = Depends(require_session)):
    return MeResponse(username=session.username, user_id=session.user_id)
