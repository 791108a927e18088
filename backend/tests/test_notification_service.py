import pytest
from sqlalchemy.exc import OperationalError

from backoffice import models, schemas
from backoffice.core.exceptions import EntityNotExistError, PersistenceError
from backoffice.schemas.enums import Code
from backoffice.services.notification_service import notification_service


@pytest.fixture
def order(db, make_product, make_order):
    return make_order(make_product("SH-001", "Linen shirt"))


def test_create_notification(db, order):
    notification = notification_service.create_notification(db, order.order_id, "Jane Doe")

    assert notification.notification_id is not None
    assert notification.message == f"New order {order.order_id} from customer Jane Doe"
    assert notification.created_at is not None


def test_create_notification_detail_is_unread(db, order, employee):
    notification = notification_service.create_notification(db, order.order_id, "Jane Doe")

    detail = notification_service.create_notification_detail(db, notification.notification_id, employee.account_id)

    assert detail.status is False
    assert detail.account_id == employee.account_id


def test_persistence_failure_is_normalized(db, order, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", broken_commit)

    with pytest.raises(PersistenceError) as exc_info:
        notification_service.create_notification(db, order.order_id, "Jane Doe")

    assert exc_info.value.code == Code.ERROR
    assert exc_info.value.to_dict() == {
        "code": "ERROR",
        "message": "An error occurred while creating the notification",
    }


def test_notifications_of_account_newest_first(db, order, employee, admin):
    first = notification_service.create_notification(db, order.order_id, "First")
    second = notification_service.create_notification(db, order.order_id, "Second")
    for notification in (first, second):
        notification_service.create_notification_detail(db, notification.notification_id, employee.account_id)
    notification_service.create_notification_detail(db, first.notification_id, admin.account_id)

    page = notification_service.get_notifications_of_account(db, employee.account_id, schemas.ListQuery(limit=1))

    assert page.total == 2
    assert page.total_pages == 2
    assert page.data[0].notification.message.endswith("Second")


def test_mark_as_read(db, order, employee):
    notification = notification_service.create_notification(db, order.order_id, "Jane Doe")
    detail = notification_service.create_notification_detail(db, notification.notification_id, employee.account_id)

    updated = notification_service.mark_as_read(db, detail.notification_detail_id, employee.account_id)

    assert updated.status is True


def test_cannot_mark_someone_elses_notification(db, order, employee, admin):
    notification = notification_service.create_notification(db, order.order_id, "Jane Doe")
    detail = notification_service.create_notification_detail(db, notification.notification_id, employee.account_id)

    with pytest.raises(EntityNotExistError):
        notification_service.mark_as_read(db, detail.notification_detail_id, admin.account_id)

    assert db.query(models.NotificationDetail).one().status is False
