from decimal import Decimal
from typing import Optional

from pydantic.alias_generators import to_snake
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from backoffice import models, schemas
from backoffice.core.config import settings
from backoffice.core.exceptions import (
    BusinessRuleError,
    DomainError,
    EntityExistError,
    EntityNotExistError,
    PersistenceError,
)
from backoffice.core.logger import setup_logger
from backoffice.schemas.enums import Code, SortOrderEnum
from backoffice.services.category_service import category_service
from backoffice.services.file_service import file_service
from backoffice.utils.clock import to_utc_naive, utc_now

logger = setup_logger("services.product")

PRODUCT_SORT_FIELDS = {
    "product_id": models.Product.product_id,
    "name": models.Product.name,
    "sold": models.Product.sold,
    "quantity": models.Product.quantity,
    "status": models.Product.status,
    "featured": models.Product.featured,
    "created_at": models.Product.created_at,
    "latest_price": models.PriceDetail.new_price,
    "applied_at": models.PriceDetail.applied_at,
}

PRICE_SORT_FIELDS = {
    "applied_at": models.PriceDetail.applied_at,
    "created_at": models.PriceDetail.created_at,
    "new_price": models.PriceDetail.new_price,
}


def _to_decimal(price: float) -> Decimal:
    return Decimal(str(price)).quantize(Decimal('0.01'))


def _order_by(sort_fields: dict, query: schemas.ListQuery, default: str):
    # Clients may send the camelCase names they see in responses
    field = to_snake(query.sort_field or default)
    column = sort_fields.get(field)
    if column is None:
        raise BusinessRuleError(f"Cannot sort by '{query.sort_field}'")
    return column.desc() if query.sort_order == SortOrderEnum.desc else column.asc()


class ProductService:
    def get(self, db: Session, product_id: str):
        return db.query(models.Product).filter(models.Product.product_id == product_id).first()

    def get_by_name(self, db: Session, name: str):
        return db.query(models.Product).filter(models.Product.name == name).first()

    def get_current_price(self, db: Session, product_id: str) -> Optional[models.PriceDetail]:
        """Latest price whose effective date has arrived, or None."""
        return db.query(models.PriceDetail).filter(
            models.PriceDetail.product_id == product_id,
            models.PriceDetail.applied_at <= utc_now()
        ).order_by(
            models.PriceDetail.applied_at.desc(),
            models.PriceDetail.price_detail_id.desc()
        ).first()

    def _to_schema(self, product: models.Product, price: Optional[models.PriceDetail]) -> schemas.Product:
        return schemas.Product(
            product_id=product.product_id,
            name=product.name,
            category_id=product.category_id,
            thumbnail=product.thumbnail,
            description=product.description,
            sold=product.sold,
            quantity=product.quantity,
            status=product.status,
            featured=product.featured,
            price=float(price.new_price) if price is not None else None
        )

    def get_product_list(self, db: Session, query: schemas.ListQuery) -> schemas.Page:
        """
        Page through products joined with their current price.

        The current price is picked per product by a correlated subquery
        (applied_at <= now, newest first). Products without an applied price
        are kept with a null price.
        """
        try:
            now = utc_now()
            latest = aliased(models.PriceDetail)
            latest_price_id = (
                select(latest.price_detail_id)
                .where(
                    latest.product_id == models.Product.product_id,
                    latest.applied_at <= now
                )
                .order_by(latest.applied_at.desc(), latest.price_detail_id.desc())
                .limit(1)
                .correlate(models.Product)
                .scalar_subquery()
            )

            q = (
                db.query(
                    models.Product,
                    models.PriceDetail.new_price,
                    models.PriceDetail.applied_at
                )
                .outerjoin(models.PriceDetail, models.PriceDetail.price_detail_id == latest_price_id)
            )
            # Literal substring: % and _ typed by the user are not wildcards
            name_filter = models.Product.name.icontains(query.search, autoescape=True) if query.search else None
            if name_filter is not None:
                q = q.filter(name_filter)

            rows = (
                q.order_by(_order_by(PRODUCT_SORT_FIELDS, query, "name"), models.Product.product_id)
                .offset(query.offset)
                .limit(query.limit)
                .all()
            )

            if settings.PRODUCT_TOTAL_COUNTS_SEARCH and name_filter is not None:
                total = db.query(models.Product).filter(name_filter).count()
            else:
                total = db.query(models.Product).count()

            data = [
                schemas.ProductListItem(
                    product_id=product.product_id,
                    name=product.name,
                    category_id=product.category_id,
                    thumbnail=product.thumbnail,
                    description=product.description,
                    sold=product.sold,
                    quantity=product.quantity,
                    status=product.status,
                    featured=product.featured,
                    latest_price=float(latest_price) if latest_price is not None else None,
                    applied_at=applied_at
                )
                for product, latest_price, applied_at in rows
            ]
            return schemas.Page.build(data, total, query)
        except SQLAlchemyError as e:
            logger.error(f"Error getting product list: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while getting the product list") from e

    def create_product(self, db: Session, file, data: schemas.ProductCreate, user_id: Optional[int]) -> schemas.Product:
        try:
            if self.get(db, data.product_id):
                raise EntityExistError("Product id already exists")
            if self.get_by_name(db, data.name):
                raise EntityExistError("Product name already exists")

            category = category_service.get(db, data.category_id)
            if not category:
                raise EntityNotExistError("Category not found")

            image = file_service.upload_image(db, file)
            if image.code != Code.SUCCESS:
                db.rollback()
                raise DomainError(image.message, code=image.code)

            product = models.Product(
                product_id=data.product_id,
                name=data.name,
                category_id=category.category_id,
                thumbnail=image.data.image_id,
                description=data.description,
                sold=0,
                quantity=data.quantity,
                status=data.status,
                featured=data.featured
            )
            db.add(product)
            db.flush()

            now = utc_now()
            price = models.PriceDetail(
                admin_id=user_id,
                product_id=product.product_id,
                new_price=_to_decimal(data.price),
                applied_at=now,
                created_at=now
            )
            db.add(price)

            # Image, product and first price become visible together
            db.commit()
            db.refresh(product)
            db.refresh(price)
            logger.info(f"Created product {product.product_id} with price {price.new_price}")
            return self._to_schema(product, price)
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Integrity error creating product {data.product_id}: {str(e)}")
            raise EntityExistError("Product already exists") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating product: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while creating the product") from e

    def edit_product(self, db: Session, product_id: str, file, data: schemas.ProductUpdate) -> schemas.Product:
        try:
            product = self.get(db, product_id)
            if not product:
                raise EntityNotExistError("Product not found")

            # Matches the product itself too, so an edit must carry a new name
            if self.get_by_name(db, data.name):
                raise EntityExistError("Product name already exists")

            category = category_service.get(db, data.category_id)
            if not category:
                raise EntityNotExistError("Category not found")

            product.name = data.name
            product.category_id = category.category_id
            product.description = data.description
            product.quantity = data.quantity
            product.status = data.status
            product.featured = data.featured

            if file is not None:
                image = file_service.upload_image(db, file)
                if image.code != Code.SUCCESS:
                    db.rollback()
                    raise DomainError(image.message, code=image.code)

                old_thumbnail = product.thumbnail
                product.thumbnail = image.data.image_id
                file_service.delete_image(db, old_thumbnail)

            db.commit()
            db.refresh(product)
            logger.info(f"Edited product {product_id}")
            return self._to_schema(product, self.get_current_price(db, product_id))
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Integrity error editing product {product_id}: {str(e)}")
            raise EntityExistError("Product name already exists") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error editing product {product_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while editing the product") from e

    def delete_product(self, db: Session, product_id: str) -> str:
        try:
            product = self.get(db, product_id)
            if not product:
                raise EntityNotExistError("Product not found")

            count = db.query(models.OrderDetail).filter(models.OrderDetail.product_id == product_id).count()
            if count > 0:
                raise BusinessRuleError("Product cannot be deleted because it has been ordered")

            file_service.delete_image(db, product.thumbnail)
            db.query(models.PriceDetail).filter(
                models.PriceDetail.product_id == product_id
            ).delete(synchronize_session=False)
            db.delete(product)
            db.commit()

            logger.info(f"Deleted product {product_id}")
            return product_id
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting product {product_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while deleting the product") from e

    def get_price_list_of_product(self, db: Session, product_id: str, query: schemas.ListQuery) -> schemas.Page:
        try:
            if not self.get(db, product_id):
                raise EntityNotExistError("Product not found")

            q = db.query(models.PriceDetail).filter(models.PriceDetail.product_id == product_id)
            total = q.count()
            prices = (
                q.order_by(_order_by(PRICE_SORT_FIELDS, query, "applied_at"), models.PriceDetail.price_detail_id)
                .offset(query.offset)
                .limit(query.limit)
                .all()
            )
            data = [schemas.PriceDetail.model_validate(price) for price in prices]
            return schemas.Page.build(data, total, query)
        except SQLAlchemyError as e:
            logger.error(f"Error getting price list of product {product_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while getting the price list") from e

    def add_new_price(self, db: Session, product_id: str, user_id: Optional[int],
                      data: schemas.PriceDetailCreate) -> schemas.PriceDetail:
        try:
            if not self.get(db, product_id):
                raise EntityNotExistError("Product not found")

            price = models.PriceDetail(
                admin_id=user_id,
                product_id=product_id,
                new_price=_to_decimal(data.price),
                applied_at=to_utc_naive(data.applied_at),
                created_at=utc_now()
            )
            db.add(price)
            db.commit()
            db.refresh(price)
            logger.info(f"Scheduled price {price.new_price} for product {product_id} at {price.applied_at}")
            return schemas.PriceDetail.model_validate(price)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error adding price to product {product_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while adding the price") from e

    def delete_new_price(self, db: Session, price_id: int) -> int:
        try:
            price = db.query(models.PriceDetail).filter(models.PriceDetail.price_detail_id == price_id).first()
            if not price:
                raise EntityNotExistError("Price not found")

            if price.applied_at <= utc_now():
                raise BusinessRuleError("This price has already been applied and cannot be deleted")

            db.delete(price)
            db.commit()
            logger.info(f"Deleted scheduled price {price_id}")
            return price_id
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting price {price_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while deleting the price") from e

    def get_product(self, db: Session, product_id: str) -> schemas.Product:
        try:
            product = self.get(db, product_id)
            if not product:
                raise EntityNotExistError("Product not found")
            return self._to_schema(product, self.get_current_price(db, product_id))
        except SQLAlchemyError as e:
            logger.error(f"Error getting product {product_id}: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while getting the product") from e

product_service = ProductService()
