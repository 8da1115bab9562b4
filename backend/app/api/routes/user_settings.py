"""Settings Routes — the logged-in user's anniversary/birthday dates and messages.

Invariants:
    - GET always returns a settings object (defaults created on first read)
    - PUT applies only the fields the client sent
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_storage, require_session
from app.core.auth_sessions import AuthSession
from app.schemas.settings import SettingsResponse, SettingsUpdate
from app.services.storage import Storage

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse)
async def get_settings(
    session: AuthSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
):
    return await storage.get_settings(session.user_id)


@router.put("", response_model=SettingsResponse)
async def update_settings(
    body: SettingsUpdate,
    session: AuthSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
):
    return await storage.update_settings(
        session.user_id, body.model_dump(exclude_unset=True),
    )
