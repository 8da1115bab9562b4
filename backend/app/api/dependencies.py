"""Route Dependencies — storage, upload store and login-session resolution.

Invariants:
    - Per-app objects (settings, session registry, passkey table, upload store) are read from
      request.app.state, never from module globals
    - require_session raises AuthenticationError (401) for a missing, unknown or
      expired bearer token; routes never see an unauthenticated request

Design Decisions:
    - HTTPBearer(auto_error=False): missing header becomes our 401 envelope, not FastAPI's 403
"""

from datetime import datetime, timezone

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.core.auth_sessions import AuthSession, PasskeyTable, SessionRegistry
from app.core.errors import AuthenticationError
from app.infrastructure.database import get_db
from app.services.storage import Storage
from app.services.uploads import UploadStore

_bearer = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> Storage:
    return Storage(db, default_anniversary_date=settings.default_anniversary_date)


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.session_registry


def get_passkey_table(request: Request) -> PasskeyTable:
    return request.app.state.passkey_table


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.upload_store


def require_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    registry: SessionRegistry = Depends(get_session_registry),
) -> AuthSession:
    """Resolve the bearer token to an open login session."""
    if credentials is None:
        raise AuthenticationError()
    session = registry.get(credentials.credentials, datetime.now(timezone.utc))
    if session is None:
        raise AuthenticationError(
            "Session expired or unknown", "INVALID_SESSION",
        )
    return session
