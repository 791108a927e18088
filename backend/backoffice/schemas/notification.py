from typing import Optional
from datetime import datetime
from backoffice.schemas.base import CamelModel

class Notification(CamelModel):
    notification_id: int
    order_id: int
    message: str
    created_at: Optional[datetime] = None

class NotificationDetail(CamelModel):
    notification_detail_id: int
    notification_id: int
    account_id: int
    status: bool
    notification: Optional[Notification] = None
