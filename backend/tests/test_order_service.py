import pytest

from backoffice import models, schemas
from backoffice.core.exceptions import BusinessRuleError, EntityNotExistError
from backoffice.schemas.enums import AccountStatusEnum, RoleEnum
from backoffice.services.order_service import order_service


def order_in(*items):
    return schemas.OrderCreate(
        full_name="Jane Doe",
        phone="0123456789",
        address="1 Main St",
        items=[schemas.OrderItemCreate(product_id=product_id, quantity=quantity) for product_id, quantity in items],
    )


def test_create_order_snapshots_prices_and_moves_stock(db, make_product, yesterday, tomorrow):
    make_product("SH-001", "Linen shirt", prices=[(100, yesterday), (150, tomorrow)], quantity=5)
    make_product("SH-002", "Denim jacket", prices=[(300, yesterday)], quantity=2)

    order = order_service.create_order(db, order_in(("SH-001", 2), ("SH-002", 1)))

    assert float(order.total) == 500
    assert sorted((detail.product_id, detail.quantity, float(detail.price)) for detail in order.details) == [
        ("SH-001", 2, 100.0),
        ("SH-002", 1, 300.0),
    ]
    shirt = db.query(models.Product).filter(models.Product.product_id == "SH-001").one()
    assert (shirt.quantity, shirt.sold) == (3, 2)


def test_create_order_notifies_active_staff(db, make_product, make_account, yesterday):
    make_product("SH-001", "Linen shirt", prices=[(100, yesterday)])
    admin = make_account("boss", role=RoleEnum.admin)
    clerk = make_account("clerk", role=RoleEnum.employee)
    make_account("former", role=RoleEnum.employee, status=AccountStatusEnum.locked)

    order = order_service.create_order(db, order_in(("SH-001", 1)))

    notification = db.query(models.Notification).one()
    assert notification.order_id == order.order_id
    assert notification.message == f"New order {order.order_id} from customer Jane Doe"
    recipients = sorted(detail.account_id for detail in db.query(models.NotificationDetail).all())
    assert recipients == sorted([admin.account_id, clerk.account_id])


def test_not_enough_stock_rolls_back(db, make_product, yesterday):
    make_product("SH-001", "Linen shirt", prices=[(100, yesterday)], quantity=5)
    make_product("SH-002", "Denim jacket", prices=[(300, yesterday)], quantity=1)

    with pytest.raises(BusinessRuleError):
        order_service.create_order(db, order_in(("SH-001", 2), ("SH-002", 3)))

    assert db.query(models.Order).count() == 0
    shirt = db.query(models.Product).filter(models.Product.product_id == "SH-001").one()
    assert (shirt.quantity, shirt.sold) == (5, 0)


def test_product_without_price_cannot_be_ordered(db, make_product, tomorrow):
    make_product("SH-001", "Linen shirt", prices=[(100, tomorrow)])

    with pytest.raises(BusinessRuleError):
        order_service.create_order(db, order_in(("SH-001", 1)))


def test_unknown_product(db, category):
    with pytest.raises(EntityNotExistError):
        order_service.create_order(db, order_in(("NOPE", 1)))


def test_get_order(db, make_product, make_order):
    order = make_order(make_product("SH-001", "Linen shirt"), quantity=2)

    result = order_service.get_order(db, order.order_id)

    assert result.full_name == "Jane Doe"
    assert [detail.quantity for detail in result.details] == [2]


def test_get_missing_order(db):
    with pytest.raises(EntityNotExistError):
        order_service.get_order(db, 404)
