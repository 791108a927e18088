from sqlalchemy import Column, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from backoffice.models.base import Base

class NotificationDetail(Base):
    __tablename__ = "notification_details"

    notification_detail_id = Column(Integer, primary_key=True, index=True)
    notification_id = Column(Integer, ForeignKey("notifications.notification_id", ondelete="CASCADE"), nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.account_id", ondelete="CASCADE"), nullable=False, index=True)
    # False until the recipient opens it
    status = Column(Boolean, nullable=False, default=False)

    notification = relationship("Notification", back_populates="details")
    account = relationship("Account")
