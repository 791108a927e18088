from pydantic import Field
from typing import Optional
from datetime import datetime
from backoffice.schemas.base import CamelModel

class ProductBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    category_id: str
    description: Optional[str] = None
    quantity: int = Field(0, ge=0)
    status: int = 1
    featured: bool = False

class ProductCreate(ProductBase):
    product_id: str = Field(..., min_length=1, max_length=50)
    price: float = Field(..., ge=0)

class ProductUpdate(ProductBase):
    pass

class Product(CamelModel):
    """Product as returned by create/edit/get, with its current price."""
    product_id: str
    name: str
    category_id: str
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    sold: int
    quantity: int
    status: int
    featured: bool
    price: Optional[float] = None

class ProductListItem(CamelModel):
    product_id: str
    name: str
    category_id: str
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    sold: int
    quantity: int
    status: int
    featured: bool
    latest_price: Optional[float] = None
    applied_at: Optional[datetime] = None
