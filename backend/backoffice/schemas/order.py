from pydantic import Field
from typing import List, Optional
from datetime import datetime
from backoffice.schemas.base import CamelModel

class OrderItemCreate(CamelModel):
    product_id: str
    quantity: int = Field(..., ge=1)

class OrderCreate(CamelModel):
    full_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=6, max_length=20)
    address: str = Field(..., min_length=1)
    note: Optional[str] = None
    items: List[OrderItemCreate] = Field(..., min_length=1)

class OrderDetail(CamelModel):
    order_detail_id: int
    product_id: str
    quantity: int
    price: float

class Order(CamelModel):
    order_id: int
    full_name: str
    phone: str
    address: str
    note: Optional[str] = None
    status: int
    total: float
    created_at: Optional[datetime] = None
    details: List[OrderDetail] = []
