from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice import models, schemas
from backoffice.core.exceptions import EntityExistError, PersistenceError
from backoffice.core.logger import setup_logger

logger = setup_logger("services.category")

class CategoryService:
    def get(self, db: Session, category_id: str):
        return db.query(models.Category).filter(models.Category.category_id == category_id).first()

    def get_by_name(self, db: Session, name: str):
        return db.query(models.Category).filter(models.Category.name == name).first()

    def get_all(self, db: Session) -> List[models.Category]:
        try:
            return db.query(models.Category).order_by(models.Category.name).all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting categories: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while getting categories") from e

    def create(self, db: Session, category: schemas.CategoryCreate):
        try:
            if self.get(db, category.category_id):
                raise EntityExistError("Category id already exists")
            if self.get_by_name(db, category.name):
                raise EntityExistError("Category name already exists")

            db_category = models.Category(**category.model_dump())
            db.add(db_category)
            db.commit()
            db.refresh(db_category)
            return db_category
        except IntegrityError as e:
            db.rollback()
            raise EntityExistError("Category already exists") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating category: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while creating the category") from e

category_service = CategoryService()
