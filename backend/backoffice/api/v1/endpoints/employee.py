from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from backoffice import models, schemas
from backoffice.api import deps
from backoffice.core.exceptions import ServiceError
from backoffice.core.logger import setup_logger
from backoffice.services.notification_service import notification_service
from backoffice.services.order_service import order_service

router = APIRouter()

logger = setup_logger("api.employee")

@router.post("/orders", response_model=schemas.Order, status_code=201)
def create_order(
    order_in: schemas.OrderCreate,
    db: Session = Depends(deps.get_db),
    account: models.Account = Depends(deps.get_current_account)
):
    """
    Place an order and notify staff.
    """
    try:
        return order_service.create_order(db, order_in)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error creating order: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.get("/notifications", response_model=schemas.Page[schemas.NotificationDetail])
def read_notifications(
    query: schemas.ListQuery = Depends(deps.get_list_query),
    db: Session = Depends(deps.get_db),
    account: models.Account = Depends(deps.get_current_account)
):
    """
    Page through the caller's notifications, newest first.
    """
    try:
        return notification_service.get_notifications_of_account(db, account.account_id, query)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error getting notifications of account {account.account_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.patch("/notifications/{notification_detail_id}/read", response_model=schemas.NotificationDetail)
def mark_notification_read(
    notification_detail_id: int,
    db: Session = Depends(deps.get_db),
    account: models.Account = Depends(deps.get_current_account)
):
    """
    Mark one of the caller's notifications as read.
    """
    try:
        return notification_service.mark_as_read(db, notification_detail_id, account.account_id)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error marking notification {notification_detail_id} as read: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")
