"""Upload Route — stores an image and returns the URL to reference from photos/events."""

import logging

from fastapi import APIRouter, Depends, File, UploadFile, status
from starlette.concurrency import run_in_threadpool

from app.api.dependencies import get_upload_store, require_session
from app.core.auth_sessions import AuthSession
from app.schemas.content import UploadResponse
from app.services.uploads import UploadStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/uploads", tags=["uploads"])


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: UploadFile = File(...),
    session: AuthSession = Depends(require_session),
    uploads: UploadStore = Depends(get_upload_store),
):
    # max_bytes + 1 bytes: enough to detect an oversized file
    data = await file.read(uploads.max_bytes + 1)
    url = await run_in_threadpool(
        uploads.save, file.filename or "image", file.content_type, data,
    )
    logger.info(f"Image uploaded: {url}", extra={"username": session.username})
    return UploadResponse(image_url=url)
