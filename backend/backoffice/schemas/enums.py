from enum import Enum


class Code(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    ENTITY_EXIST = "ENTITY_EXIST"
    ENTITY_NOT_EXIST = "ENTITY_NOT_EXIST"


class RoleEnum(str, Enum):
    admin = "ADMIN"
    employee = "EMPLOYEE"


class AccountStatusEnum(int, Enum):
    locked = 0
    active = 1


class SortOrderEnum(str, Enum):
    asc = "asc"
    desc = "desc"
