# backoffice/schemas/__init__.py

from .enums import Code, RoleEnum, AccountStatusEnum, SortOrderEnum
from .pagination import ListQuery, Page
from .account import Account, AccountCreate
from .category import Category, CategoryCreate
from .product import Product, ProductCreate, ProductUpdate, ProductListItem
from .price_detail import PriceDetail, PriceDetailCreate
from .order import Order, OrderCreate, OrderItemCreate, OrderDetail
from .notification import Notification, NotificationDetail
from .file import FileUploadResult, StoredImage

__all__ = [
    "Code", "RoleEnum", "AccountStatusEnum", "SortOrderEnum",
    "ListQuery", "Page",
    "Account", "AccountCreate",
    "Category", "CategoryCreate",
    "Product", "ProductCreate", "ProductUpdate", "ProductListItem",
    "PriceDetail", "PriceDetailCreate",
    "Order", "OrderCreate", "OrderItemCreate", "OrderDetail",
    "Notification", "NotificationDetail",
    "FileUploadResult", "StoredImage",
]
