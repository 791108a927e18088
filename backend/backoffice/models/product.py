from sqlalchemy import Column, Integer, String, ForeignKey, Text, Boolean, TIMESTAMP
from sqlalchemy.orm import relationship
from backoffice.models.base import Base
from backoffice.utils.clock import utc_now

class Product(Base):
    __tablename__ = "products"

    # Product codes are chosen by the admin, not generated
    product_id = Column(String(50), primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    category_id = Column(String(50), ForeignKey("categories.category_id"), nullable=False)
    thumbnail = Column(String(32), ForeignKey("images.image_id", ondelete="SET NULL"), nullable=True)
    description = Column(Text)
    sold = Column(Integer, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=0)
    status = Column(Integer, nullable=False, default=1)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, default=utc_now)
    updated_at = Column(TIMESTAMP, onupdate=utc_now)

    category = relationship("Category", back_populates="products")
    prices = relationship("PriceDetail", back_populates="product")
    order_details = relationship("OrderDetail", back_populates="product")
