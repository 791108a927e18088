from pydantic import Field
from typing import Optional
from datetime import datetime
from backoffice.schemas.base import CamelModel

class CategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

class CategoryCreate(CategoryBase):
    category_id: str = Field(..., min_length=1, max_length=50)

class Category(CategoryBase):
    category_id: str
    created_at: Optional[datetime] = None
