"""Photo Gallery Routes — list, add, like/unlike and delete photos.

Invariants:
    - All endpoints require an open login session
    - PUT /{id}/like flips the shared liked flag and returns the updated photo
    - DELETE removes the row, then the stored image when it lives in the upload store
"""

import logging

from fastapi import APIRouter, Depends, status
from starlette.concurrency import run_in_threadpool

from app.api.dependencies import get_storage, get_upload_store, require_session
from app.core.auth_sessions import AuthSession
from app.core.errors import ResourceNotFoundError
from app.schemas.content import DeletedResponse, PhotoCreate, PhotoResponse
from app.services.storage import Storage
from app.services.uploads import UploadStore

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/photos", tags=["photos"],
    dependencies=[Depends(require_session)],
)


@router.get("", response_model=list[PhotoResponse])
async def list_photos(storage: Storage = Depends(get_storage)):
    return await storage.list_photos()


@router.post("", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED)
async def create_photo(
    body: PhotoCreate,
    session: AuthSession = Depends(require_session),
    storage: Storage = Depends(get_storage),
):
    photo = await storage.create_photo(body.model_dump(), session.user_id)
    logger.info(
        f"Photo added: {photo.title}",
        extra={"username": session.username, "resource": "photo", "resource_id": photo.id},
    )
    return photo


@router.put("/{photo_id}/like", response_model=PhotoResponse)
async def toggle_like(photo_id: int, storage: Storage = Depends(get_storage)):
    photo = await storage.toggle_photo_like(photo_id)
    if not photo:
        raise ResourceNotFoundError("Photo", str(photo_id))
    return photo


@router.delete("/{photo_id}", response_model=DeletedResponse)
async def delete_photo(
    photo_id: int,
    storage: Storage = Depends(get_storage),
    uploads: UploadStore = Depends(get_upload_store),
):
    photo = await storage.delete_photo(photo_id)
    if not photo:
        raise ResourceNotFoundError("Photo", str(photo_id))
    await run_in_threadpool(uploads.remove, photo.image_url)
    logger.info("Photo deleted", extra={"resource": "photo", "resource_id": photo_id})
    return DeletedResponse(message="Photo deleted successfully")
