from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.data import models  # noqa: F401
from app.api.deps import (
    get_cart_store,
    get_lock_service,
    get_notification_service,
    get_product_client,
)
from app.data.database import Base, get_db
from app.data.models.user import UserModel
from app.main import create_app
from app.services.cart_service import CartService
from app.services.cart_store import CartStore
from app.services.checkout_service import CheckoutService


PRODUCTS = {
    "p1": {
        "id": "p1",
        "name": "Paracetamol 500mg",
        "description": "Pain and fever relief tablets",
        "category_id": "c-analgesics",
        "images": ["/images/paracetamol.png"],
        "rating": "4.70",
        "variants": [{"name": "10-pack", "price": "500"}],
        "in_stock": True,
    },
    "p2": {
        "id": "p2",
        "name": "Vitamin C 1000mg",
        "description": "Effervescent tablets",
        "category_id": "c-vitamins",
        "images": [],
        "rating": "4.50",
        "variants": [{"name": "tube of 20", "price": "1200"}],
        "in_stock": True,
    },
}


class FakeProductClient:
    def __init__(self, products=None):
        self.products = PRODUCTS if products is None else products
        self.calls = []

    def fetch_product(self, product_id):
        self.calls.append(product_id)
        return self.products.get(product_id)


class FakeLockService:
    def __init__(self):
        self.held = {}

    def acquire_checkout_lock(self, user_id, token, ttl):
        if user_id in self.held:
            return False
        self.held[user_id] = token
        return True

    def release_checkout_lock(self, user_id, token):
        if self.held.get(user_id) == token:
            del self.held[user_id]
            return True
        return False


class FakeNotifier:
    def __init__(self):
        self.sent = []

    def send_order_notification(self, user_id, order_id):
        self.sent.append((user_id, order_id))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store():
    return CartStore()


@pytest.fixture
def product_client():
    return FakeProductClient()


@pytest.fixture
def lock_service():
    return FakeLockService()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def cart_service(store, product_client):
    return CartService(store=store, product_client=product_client)


@pytest.fixture
def checkout_service(db, cart_service, lock_service, notifier):
    return CheckoutService(
        db=db,
        cart_service=cart_service,
        lock_service=lock_service,
        notification_service=notifier,
    )


@pytest.fixture
def make_user(db):
    def _make(user_id="u1", balance="0", name="Jan Kowalski"):
        user = UserModel(id=user_id, full_name=name, wallet_balance=Decimal(balance))
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def client(session_factory, store, product_client, lock_service, notifier):
    app = create_app()

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_cart_store] = lambda: store
    app.dependency_overrides[get_product_client] = lambda: product_client
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    app.dependency_overrides[get_notification_service] = lambda: notifier

    # bez "with" - lifespan (create_all na prawdziwej bazie) sie nie odpala
    return TestClient(app)
