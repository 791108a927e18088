"""
Service-layer errors.

Domain errors are expected outcomes with a stable code (missing entity,
duplicate entity, rejected business rule). Persistence errors wrap
infrastructure failures and always carry the generic ERROR code.
"""
from typing import Optional

from backoffice.schemas.enums import Code


class ServiceError(Exception):
    code: Code = Code.ERROR

    def __init__(self, message: str, code: Optional[Code] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}


class DomainError(ServiceError):
    pass


class EntityExistError(DomainError):
    code = Code.ENTITY_EXIST


class EntityNotExistError(DomainError):
    code = Code.ENTITY_NOT_EXIST


class BusinessRuleError(DomainError):
    code = Code.ERROR


class PersistenceError(ServiceError):
    code = Code.ERROR
