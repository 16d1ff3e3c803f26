"""
Media API
"""
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from studentblog.db.database import get_db
from studentblog.models.media import Media
from studentblog.models.user import User
from studentblog.schemas.common import ResponseModel
from studentblog.schemas.media import MediaResponse
from studentblog.services.media_service import MediaService
from studentblog.utils.auth import require_admin

router = APIRouter(prefix="/api/admin", tags=["Media"])


def build_media_response(media: Media) -> MediaResponse:
    return MediaResponse(
        id=media.id,
        filename=media.filename,
        originalFilename=media.original_filename,
        mimetype=media.mimetype,
        size=media.size,
        path=media.path,
        uploadedAt=media.uploaded_at,
        uploadedBy=media.uploaded_by
    )


@router.post("/media", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
async def upload_media(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Upload a file (multipart field "file")
    """
    media = await MediaService.store_upload(db, file, uploaded_by=admin.id)

    return ResponseModel(
        code=201,
        message="File uploaded",
        data=build_media_response(media)
    )


@router.get("/media", response_model=ResponseModel)
async def list_media(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Uploads of the current admin, newest first
    """
    items = await MediaService.get_media_by_user(db, admin.id)
    return ResponseModel(code=200, data=[build_media_response(m) for m in items])


@router.get("/media/{media_id}", response_model=ResponseModel)
async def get_media(
    media_id: int,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    media = await MediaService.get_media_by_id(db, media_id)
    if not media:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Media not found"
        )

    return ResponseModel(code=200, data=build_media_response(media))
