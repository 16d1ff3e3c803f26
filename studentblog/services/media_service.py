"""
Media upload service
"""
import logging
import os
import uuid
import aiofiles
from typing import Optional, List
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from studentblog.core.config import settings
from studentblog.core.exceptions import EmptyUploadError, MediaTooLargeError, UnsupportedMediaTypeError
from studentblog.models.media import Media

logger = logging.getLogger(__name__)


class MediaService:
    """Stores uploads on disk and records them"""

    @staticmethod
    async def store_upload(db: AsyncSession, file: UploadFile, uploaded_by: int) -> Media:
        """
        Save an uploaded file under a generated name and record it

        Args:
            db: database session
            file: multipart upload
            uploaded_by: ID of the uploading admin

        Returns:
            Media: the stored record

        Raises:
            EmptyUploadError: no file or an empty one
            UnsupportedMediaTypeError: mimetype not in ALLOWED_UPLOAD_TYPES
            MediaTooLargeError: larger than MAX_UPLOAD_SIZE
        """
        if file is None or not file.filename:
            raise EmptyUploadError()

        if file.content_type not in settings.ALLOWED_UPLOAD_TYPES:
            raise UnsupportedMediaTypeError(f"Unsupported file type: {file.content_type}")

        contents = await file.read()
        if not contents:
            raise EmptyUploadError()
        if len(contents) > settings.MAX_UPLOAD_SIZE:
            raise MediaTooLargeError(f"File too large (max {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB)")

        ext = os.path.splitext(file.filename)[1].lower()
        filename = f"{uuid.uuid4().hex}{ext}"
        file_path = os.path.join(settings.UPLOAD_DIR, filename)

        os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
        async with aiofiles.open(file_path, "wb") as f:
            await f.write(contents)

        media = Media(
            filename=filename,
            original_filename=file.filename,
            mimetype=file.content_type,
            size=len(contents),
            path=f"/uploads/{filename}",
            uploaded_by=uploaded_by
        )
        try:
            db.add(media)
            await db.commit()
        except Exception:
            await db.rollback()
            os.remove(file_path)
            logger.warning("Removed %s after its record failed to save", filename)
            raise
        await db.refresh(media)

        logger.info("Stored upload '%s' as %s (%d bytes)", file.filename, filename, media.size)
        return media

    @staticmethod
    async def get_media_by_id(db: AsyncSession, media_id: int) -> Optional[Media]:
        return await db.get(Media, media_id)

    @staticmethod
    async def get_media_by_user(db: AsyncSession, user_id: int) -> List[Media]:
        result = await db.execute(
            select(Media).where(Media.uploaded_by == user_id).order_by(Media.uploaded_at.desc(), Media.id.desc())
        )
        return list(result.scalars().all())
