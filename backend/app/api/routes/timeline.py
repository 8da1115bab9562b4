"""Timeline Routes — CRUD over dated relationship milestones.

Invariants:
    - All endpoints require an open login session
    - GET lists events oldest first
    - Unknown ids return 404 RESOURCE_NOT_FOUND
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_storage, require_session
from app.core.auth_sessions import AuthSession
from app.core.errors import ResourceNotFoundError
from app.schemas.content import (
    DeletedResponse, TimelineEventCreate, TimelineEventResponse, TimelineEventUpdate,
)
from app.services.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/timeline", tags=["timeline"],
    dependencies=[Depends(require_session)],
)


@router.get("", response_model=list[TimelineEventResponse])
async def list_events(storage: Storage = Depends(get_storage)):
    return await storage.list_timeline_events()


@router.post(
    "", response_model=TimelineEventResponse, status_code=status.HTTP_201_CREATED,
)
async def create_event(
    body: TimelineEventCreate,
    session: AuthSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
):
    event = await storage.create_timeline_event(body.model_dump(), session.user_id)
    logger.info(
        f"Timeline event created: {event.title}",
        extra={"username": session.username, "resource": "timeline", "resource_id": event.id},
    )
    return event


@router.put("/{event_id}", response_model=TimelineEventResponse)
async def update_event(
    event_id: int,
    body: TimelineEventUpdate,
    storage: Storage = Depends(get_storage),
):
    event = await storage.update_timeline_event(
        event_id, body.model_dump(exclude_unset=True),
    )
    if not event:
        raise ResourceNotFoundError("Timeline event", str(event_id))
    return event


@router.delete("/{event_id}", response_model=DeletedResponse)
async def delete_event(event_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.delete_timeline_event(event_id):
        raise ResourceNotFoundError("Timeline event", str(event_id))
    logger.info("Timeline event deleted", extra={"resource": "timeline", "resource_id": event_id})
    return DeletedResponse(message="Event deleted successfully")
