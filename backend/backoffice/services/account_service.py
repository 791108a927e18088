from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from backoffice import models, schemas
from backoffice.core.exceptions import EntityExistError, PersistenceError
from backoffice.core.logger import setup_logger
from backoffice.schemas.enums import AccountStatusEnum, RoleEnum

logger = setup_logger("services.account")

class AccountService:
    def get(self, db: Session, account_id: int):
        return db.query(models.Account).filter(models.Account.account_id == account_id).first()

    def get_by_username(self, db: Session, username: str):
        return db.query(models.Account).filter(models.Account.username == username).first()

    def get_recipients(self, db: Session) -> List[models.Account]:
        """Active staff accounts that are told about new orders."""
        return db.query(models.Account).filter(
            models.Account.status == AccountStatusEnum.active.value,
            models.Account.role_id.in_([RoleEnum.admin.value, RoleEnum.employee.value])
        ).order_by(models.Account.account_id).all()

    def create(self, db: Session, account: schemas.AccountCreate):
        try:
            if self.get_by_username(db, account.username):
                raise EntityExistError("Username already exists")

            db_account = models.Account(
                username=account.username,
                password=generate_password_hash(account.password),
                full_name=account.full_name,
                role_id=account.role_id.value,
                status=account.status.value
            )
            db.add(db_account)
            db.commit()
            db.refresh(db_account)
            logger.info(f"Created account {db_account.username} ({db_account.role_id})")
            return db_account
        except IntegrityError as e:
            # Lost a race against another request using the same username
            db.rollback()
            raise EntityExistError("Username already exists") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating account: {str(e)}", exc_info=True)
            raise PersistenceError("An error occurred while creating the account") from e

account_service = AccountService()
