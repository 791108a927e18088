from pydantic import Field
from typing import Optional
from datetime import datetime
from backoffice.schemas.base import CamelModel
from backoffice.schemas.enums import AccountStatusEnum, RoleEnum

class AccountCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6)
    full_name: Optional[str] = None
    role_id: RoleEnum = RoleEnum.employee
    status: AccountStatusEnum = AccountStatusEnum.active

class Account(CamelModel):
    account_id: int
    username: str
    full_name: Optional[str] = None
    role_id: str
    status: int
    created_at: Optional[datetime] = None
