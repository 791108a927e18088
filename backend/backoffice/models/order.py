from sqlalchemy import Column, Integer, String, Text, DECIMAL, TIMESTAMP
from sqlalchemy.orm import relationship
from backoffice.models.base import Base
from backoffice.utils.clock import utc_now

class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)
    address = Column(Text, nullable=False)
    note = Column(Text)
    status = Column(Integer, nullable=False, default=0)
    total = Column(DECIMAL(12, 2), nullable=False, default=0)
    created_at = Column(TIMESTAMP, default=utc_now)

    details = relationship("OrderDetail", back_populates="order")
