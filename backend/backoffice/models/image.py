import uuid

from sqlalchemy import Column, Integer, String, LargeBinary, TIMESTAMP
from backoffice.models.base import Base
from backoffice.utils.clock import utc_now

class Image(Base):
    __tablename__ = "images"

    image_id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    filename = Column(String(255))
    content_type = Column(String(100), nullable=False)
    size = Column(Integer, nullable=False)
    data = Column(LargeBinary, nullable=False)
    created_at = Column(TIMESTAMP, default=utc_now)
