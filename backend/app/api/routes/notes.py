"""Notes Routes — CRUD over shared love notes, newest first."""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_storage, require_session
from app.core.auth_sessions import AuthSession
from app.core.errors import ResourceNotFoundError
from app.schemas.content import DeletedResponse, NoteCreate, NoteResponse, NoteUpdate
from app.services.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/notes", tags=["notes"],
    dependencies=[Depends(require_session)],
)


@router.get("", response_model=list[NoteResponse])
async def list_notes(storage: Storage = Depends(get_storage)):
    return await storage.list_notes()


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    body: NoteCreate,
    session: AuthSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
):
    note = await storage.create_note(body.model_dump(), session.user_id)
    logger.info(
        "Note created",
        extra={"username": session.username, "resource": "note", "resource_id": note.id},
    )
    return note


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int, body: NoteUpdate, storage: Storage = Depends(get_storage),
):
    note = await storage.update_note(note_id, body.model_dump(exclude_unset=True))
    if not note:
        raise ResourceNotFoundError("Note", str(note_id))
    return note


@router.delete("/{note_id}", response_model=DeletedResponse)
async def delete_note(note_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.delete_note(note_id):
        raise ResourceNotFoundError("Note", str(note_id))
    logger.info("Note deleted", extra={"resource": "note", "resource_id": note_id})
    return DeletedResponse(message="Note deleted successfully")
