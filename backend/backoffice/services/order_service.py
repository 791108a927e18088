from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from backoffice import models, schemas
from backoffice.core.exceptions import BusinessRuleError, EntityNotExistError, PersistenceError
from backoffice.core.logger import setup_logger
from backoffice.services.account_service import account_service
from backoffice.services.notification_service import notification_service
from backoffice.services.product_service import product_service
from backoffice.utils.clock import utc_now

logger = setup_logger("services.order")

class OrderService:
    def get(self, db: Session, order_id: int):
        return (
            db.query(models.Order)
            .options(selectinload(models.Order.details))
            .filter(models.Order.order_id == order_id)
            .first()
        )

    def create_order(self, db: Session, data: schemas.OrderCreate):
        """
        Place an order at current prices and notify every active staff account.

        Stock moves from quantity to sold. Order, details, stock changes and
        notifications are committed together.
        """
        try:
            order = models.Order(
                full_name=data.full_name,
                phone=data.phone,
                address=data.address,
                note=data.note,
                status=0,
                created_at=utc_now()
            )
            total = Decimal("0")
            for item in data.items:
                product = product_service.get(db, item.product_id)
                if not product:
                    raise EntityNotExistError(f"Product {item.product_id} not found")

                price = product_service.get_current_price(db, product.product_id)
                if price is None:
                    raise BusinessRuleError(f"Product {product.product_id} has no price yet")
                if product.quantity < item.quantity:
                    raise BusinessRuleError(f"Not enough stock for product {product.product_id}")

                product.quantity -= item.quantity
                product.sold += item.quantity
                order.details.append(models.OrderDetail(
                    product_id=product.product_id,
                    quantity=item.quantity,
                    price=price.new_price
                ))
                total += Decimal(price.new_price) * item.quantity

            order.total = total
            db.add(order)
            db.flush()

            notification = notification_service.create_notification(
                db, order.order_id, order.full_name, commit=False
            )
            recipients = account_service.get_recipients(db)
            for account in recipients:
                notification_service.create_notification_detail(
                    db, notification.notification_id, account.account_id, commit=False
                )

            db.commit()
            logger.info(f"Created order {order.order_id} ({len(data.items)} items), notified {len(recipients)} accounts")
            return self.get(db, order.order_id)
        except (EntityNotExistError, BusinessRuleError):
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating order: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while creating the order") from e

    def get_order(self, db: Session, order_id: int):
        try:
            order = self.get(db, order_id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting order {order_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while getting the order") from e
        if not order:
            raise EntityNotExistError("Order not found")
        return order

order_service = OrderService()
