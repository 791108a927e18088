from typing import Optional

from fastapi import Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from backoffice import models, schemas
from backoffice.core.config import settings
from backoffice.core.exceptions import DomainError, ServiceError
from backoffice.database.database import SessionLocal
from backoffice.schemas.enums import AccountStatusEnum, Code, RoleEnum, SortOrderEnum
from backoffice.services.account_service import account_service

STATUS_BY_CODE = {
    Code.ENTITY_NOT_EXIST: 404,
    Code.ENTITY_EXIST: 409,
}

def get_db():
    with SessionLocal() as db:
        yield db

def to_http_exception(error: ServiceError) -> HTTPException:
    if isinstance(error, DomainError):
        status_code = STATUS_BY_CODE.get(error.code, 400)
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=error.to_dict())

def internal_error(message: str) -> HTTPException:
    return HTTPException(status_code=500, detail={"code": Code.ERROR.value, "message": message})

def get_current_account(
    x_account_id: Optional[int] = Header(None),
    db: Session = Depends(get_db)
) -> models.Account:
    """
    Resolve the calling account from the X-Account-Id header.

    Authentication happens upstream; this only loads the account the gateway vouched for.
    """
    if x_account_id is None:
        raise HTTPException(status_code=401, detail={"code": Code.ERROR.value, "message": "Missing account"})
    account = account_service.get(db, x_account_id)
    if not account:
        raise HTTPException(status_code=401, detail={"code": Code.ERROR.value, "message": "Unknown account"})
    if account.status != AccountStatusEnum.active.value:
        raise HTTPException(status_code=403, detail={"code": Code.ERROR.value, "message": "Account is locked"})
    return account

def require_admin(account: models.Account = Depends(get_current_account)) -> models.Account:
    if account.role_id != RoleEnum.admin.value:
        raise HTTPException(status_code=403, detail={"code": Code.ERROR.value, "message": "Admin role required"})
    return account

def get_list_query(
    search: Optional[str] = None,
    sort_field: Optional[str] = Query(None, alias="sortField"),
    sort_order: SortOrderEnum = Query(SortOrderEnum.asc, alias="sortOrder"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)
) -> schemas.ListQuery:
    return schemas.ListQuery(
        search=search,
        sort_field=sort_field,
        sort_order=sort_order,
        page=page,
        limit=limit
    )
