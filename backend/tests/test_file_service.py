import pytest

from backoffice import models
from backoffice.core.config import settings
from backoffice.core.exceptions import EntityNotExistError
from backoffice.schemas.enums import Code
from backoffice.services.file_service import file_service

from conftest import PNG_BYTES, make_upload


def test_upload_stages_image_in_session(db):
    result = file_service.upload_image(db, make_upload())

    assert result.code == Code.SUCCESS
    assert result.data.size == len(PNG_BYTES)
    assert result.data.content_type == "image/png"

    db.rollback()
    assert db.query(models.Image).count() == 0


def test_uploaded_image_can_be_read_back(db):
    result = file_service.upload_image(db, make_upload(filename="front.png"))
    db.commit()

    image = file_service.get_image(db, result.data.image_id)

    assert image.data == PNG_BYTES
    assert image.filename == "front.png"


@pytest.mark.parametrize("upload,message", [
    (None, "No image file provided"),
    (make_upload(content=b""), "Image file is empty"),
    (make_upload(content_type="application/pdf"), "Unsupported image type: application/pdf"),
])
def test_rejected_uploads(db, upload, message):
    result = file_service.upload_image(db, upload)

    assert result.code == Code.ERROR
    assert result.message == message
    assert result.data is None


def test_rejects_oversized_image(db, monkeypatch):
    monkeypatch.setattr(settings, "MAX_IMAGE_SIZE", 8)

    result = file_service.upload_image(db, make_upload())

    assert result.code == Code.ERROR
    assert "limit" in result.message


def test_delete_image(db):
    result = file_service.upload_image(db, make_upload())
    db.commit()

    file_service.delete_image(db, result.data.image_id)
    db.commit()

    assert db.query(models.Image).count() == 0


def test_delete_without_reference_is_a_no_op(db):
    file_service.delete_image(db, None)
    file_service.delete_image(db, "missing")


def test_get_missing_image(db):
    with pytest.raises(EntityNotExistError):
        file_service.get_image(db, "missing")
