from sqlalchemy import Column, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from backoffice.models.base import Base
from backoffice.utils.clock import utc_now

class Category(Base):
    __tablename__ = "categories"

    category_id = Column(String(50), primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP, default=utc_now)

    products = relationship("Product", back_populates="category")
