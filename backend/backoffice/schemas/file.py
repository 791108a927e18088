from typing import Optional
from backoffice.schemas.base import CamelModel
from backoffice.schemas.enums import Code

class StoredImage(CamelModel):
    image_id: str
    filename: Optional[str] = None
    content_type: str
    size: int

class FileUploadResult(CamelModel):
    code: Code
    message: str
    data: Optional[StoredImage] = None
