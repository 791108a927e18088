from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from backoffice import models, schemas
from backoffice.core.exceptions import EntityNotExistError, PersistenceError
from backoffice.core.logger import setup_logger
from backoffice.utils.clock import utc_now

logger = setup_logger("services.notification")

NEW_ORDER_MESSAGE = "New order {order_id} from customer {full_name}"

class NotificationService:
    def create_notification(self, db: Session, order_id: int, full_name: str, commit: bool = True):
        """Record a new-order notification. Pass commit=False to join the caller's transaction."""
        try:
            notification = models.Notification(
                order_id=order_id,
                message=NEW_ORDER_MESSAGE.format(order_id=order_id, full_name=full_name),
                created_at=utc_now()
            )
            db.add(notification)
            if commit:
                db.commit()
                db.refresh(notification)
            else:
                db.flush()
            return notification
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating notification for order {order_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while creating the notification") from e

    def create_notification_detail(self, db: Session, notification_id: int, account_id: int, commit: bool = True):
        try:
            detail = models.NotificationDetail(
                notification_id=notification_id,
                account_id=account_id,
                status=False
            )
            db.add(detail)
            if commit:
                db.commit()
                db.refresh(detail)
            else:
                db.flush()
            return detail
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Error creating notification {notification_id} for account {account_id}: {str(e)}",
                exc_info=True
            )
            raise PersistenceError("An error occurred while creating the notification for the user") from e

    def get_notifications_of_account(self, db: Session, account_id: int, query: schemas.ListQuery) -> schemas.Page:
        try:
            q = db.query(models.NotificationDetail).filter(models.NotificationDetail.account_id == account_id)
            total = q.count()
            details = (
                q.join(models.NotificationDetail.notification)
                .options(joinedload(models.NotificationDetail.notification))
                .order_by(models.Notification.created_at.desc(), models.NotificationDetail.notification_detail_id.desc())
                .offset(query.offset)
                .limit(query.limit)
                .all()
            )
            data = [schemas.NotificationDetail.model_validate(detail) for detail in details]
            return schemas.Page.build(data, total, query)
        except SQLAlchemyError as e:
            logger.error(f"Error getting notifications of account {account_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while getting notifications") from e

    def mark_as_read(self, db: Session, notification_detail_id: int, account_id: int):
        try:
            detail = db.query(models.NotificationDetail).filter(
                models.NotificationDetail.notification_detail_id == notification_detail_id,
                models.NotificationDetail.account_id == account_id
            ).first()
            if not detail:
                raise EntityNotExistError("Notification not found")

            detail.status = True
            db.commit()
            db.refresh(detail)
            return detail
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error marking notification {notification_detail_id} as read: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while updating the notification") from e

notification_service = NotificationService()
