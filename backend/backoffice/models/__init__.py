from .base import Base
from .account import Account
from .category import Category
from .image import Image
from .product import Product
from .price_detail import PriceDetail
from .order import Order
from .order_detail import OrderDetail
from .notification import Notification
from .notification_detail import NotificationDetail

__all__ = [
    "Base",
    "Account",
    "Category",
    "Image",
    "Product",
    "PriceDetail",
    "Order",
    "OrderDetail",
    "Notification",
    "NotificationDetail"
]
