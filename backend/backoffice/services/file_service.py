from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice import models, schemas
from backoffice.core.config import settings
from backoffice.core.exceptions import EntityNotExistError, PersistenceError
from backoffice.core.logger import setup_logger
from backoffice.schemas.enums import Code

logger = setup_logger("services.file")

class FileService:
    """
    Thumbnail storage.

    Images live in the application database and are only flushed, never
    committed, here: the caller's commit or rollback decides whether the
    stored object survives together with the product change that uses it.
    """

    def upload_image(self, db: Session, file) -> schemas.FileUploadResult:
        if file is None:
            return schemas.FileUploadResult(code=Code.ERROR, message="No image file provided")

        content_type = file.content_type or ""
        if content_type not in settings.ALLOWED_IMAGE_TYPES:
            return schemas.FileUploadResult(
                code=Code.ERROR,
                message=f"Unsupported image type: {content_type or 'unknown'}"
            )

        content = file.file.read()
        if not content:
            return schemas.FileUploadResult(code=Code.ERROR, message="Image file is empty")
        if len(content) > settings.MAX_IMAGE_SIZE:
            return schemas.FileUploadResult(
                code=Code.ERROR,
                message=f"Image exceeds the {settings.MAX_IMAGE_SIZE} byte limit"
            )

        try:
            image = models.Image(
                filename=file.filename,
                content_type=content_type,
                size=len(content),
                data=content
            )
            db.add(image)
            db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error storing image {file.filename}: {str(e)}", exc_info=True)
            return schemas.FileUploadResult(code=Code.ERROR, message="An error occurred while storing the image")

        logger.debug(f"Stored image {image.image_id} ({image.size} bytes)")
        return schemas.FileUploadResult(
            code=Code.SUCCESS,
            message="Image uploaded",
            data=schemas.StoredImage.model_validate(image)
        )

    def delete_image(self, db: Session, image_id: Optional[str]) -> None:
        if not image_id:
            return
        db.query(models.Image).filter(models.Image.image_id == image_id).delete(synchronize_session=False)

    def get_image(self, db: Session, image_id: str) -> models.Image:
        try:
            image = db.query(models.Image).filter(models.Image.image_id == image_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error loading image {image_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while loading the image") from e
        if not image:
            raise EntityNotExistError("Image not found")
        return image

file_service = FileService()
