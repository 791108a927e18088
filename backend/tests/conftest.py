import io
from datetime import timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.datastructures import Headers, UploadFile

from backoffice import models
from backoffice.api import deps
from backoffice.main import app
from backoffice.models.base import Base
from backoffice.schemas.enums import AccountStatusEnum, RoleEnum
from backoffice.utils.clock import utc_now

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with TestingSession() as session:
        yield session


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[deps.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def now():
    return utc_now()


@pytest.fixture
def yesterday(now):
    return now - timedelta(days=1)


@pytest.fixture
def tomorrow(now):
    return now + timedelta(days=1)


def make_upload(content=PNG_BYTES, content_type="image/png", filename="thumb.png"):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def make_account(db):
    def _make(username, role=RoleEnum.employee, status=AccountStatusEnum.active):
        account = models.Account(
            username=username,
            password="not-a-real-hash",
            full_name=username.title(),
            role_id=role.value,
            status=status.value,
        )
        db.add(account)
        db.commit()
        db.refresh(account)
        return account
    return _make


@pytest.fixture
def admin(make_account):
    return make_account("admin", role=RoleEnum.admin)


@pytest.fixture
def employee(make_account):
    return make_account("clerk", role=RoleEnum.employee)


@pytest.fixture
def category(db):
    category = models.Category(category_id="shirts", name="Shirts")
    db.add(category)
    db.commit()
    return category


@pytest.fixture
def make_product(db, category):
    def _make(product_id, name, prices=(), quantity=10, with_image=True):
        image = None
        if with_image:
            image = models.Image(filename=f"{product_id}.png", content_type="image/png",
                                 size=len(PNG_BYTES), data=PNG_BYTES)
            db.add(image)
            db.flush()
        product = models.Product(
            product_id=product_id,
            name=name,
            category_id=category.category_id,
            thumbnail=image.image_id if image else None,
            quantity=quantity,
            sold=0,
            status=1,
            featured=False,
        )
        db.add(product)
        db.flush()
        for price, applied_at in prices:
            db.add(models.PriceDetail(
                product_id=product_id,
                new_price=Decimal(str(price)),
                applied_at=applied_at,
                created_at=utc_now(),
            ))
        db.commit()
        db.refresh(product)
        return product
    return _make


@pytest.fixture
def make_order(db):
    def _make(product, quantity=1, price=100):
        order = models.Order(full_name="Jane Doe", phone="0123456789", address="1 Main St", total=price * quantity)
        order.details.append(models.OrderDetail(product_id=product.product_id, quantity=quantity, price=price))
        db.add(order)
        db.commit()
        db.refresh(order)
        return order
    return _make
