from sqlalchemy import Column, Integer, String, TIMESTAMP
from backoffice.models.base import Base
from backoffice.schemas.enums import AccountStatusEnum, RoleEnum
from backoffice.utils.clock import utc_now

class Account(Base):
    __tablename__ = "accounts"

    account_id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    full_name = Column(String(255))
    status = Column(Integer, nullable=False, default=AccountStatusEnum.active.value)
    role_id = Column(String(20), nullable=False, default=RoleEnum.employee.value)
    created_at = Column(TIMESTAMP, default=utc_now)
