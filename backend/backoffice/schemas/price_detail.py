from pydantic import Field
from typing import Optional
from datetime import datetime
from backoffice.schemas.base import CamelModel

class PriceDetailCreate(CamelModel):
    price: float = Field(..., ge=0)
    applied_at: datetime

class PriceDetail(CamelModel):
    price_detail_id: int
    admin_id: Optional[int] = None
    product_id: str
    new_price: float
    applied_at: datetime
    created_at: Optional[datetime] = None
