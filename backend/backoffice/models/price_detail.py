from sqlalchemy import Column, Integer, String, DECIMAL, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from backoffice.models.base import Base
from backoffice.utils.clock import utc_now

class PriceDetail(Base):
    __tablename__ = "price_details"

    price_detail_id = Column(Integer, primary_key=True, index=True)
    admin_id = Column(Integer, ForeignKey("accounts.account_id"), nullable=True)
    product_id = Column(String(50), ForeignKey("products.product_id"), nullable=False, index=True)
    new_price = Column(DECIMAL(12, 2), nullable=False)
    applied_at = Column(TIMESTAMP, nullable=False, index=True)
    created_at = Column(TIMESTAMP, default=utc_now)

    product = relationship("Product", back_populates="prices")
