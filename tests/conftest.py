"""Pytest configuration and fixtures"""
import os
import pytest
from fastapi.testclient import TestClient

# Keep the import-time app (api.index) off the real data directory
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from storefront.app import create_app
from storefront.cart import CartEvents, CartStore, MemoryStorage
from storefront.config import Settings
from storefront.notifications import NoticeBoard


@pytest.fixture
def test_settings():
    """Settings using in-memory cart storage"""
    return Settings(
        storage_backend="memory",
        storage_path="",
        storage_key="gta6_cart",
        redis_url="",
        redis_token="",
        promo_codes="",
        currency="USD",
        default_language="en",
    )


@pytest.fixture
def storage():
    """Empty in-memory storage"""
    return MemoryStorage()


@pytest.fixture
def notices():
    return NoticeBoard()


@pytest.fixture
def events():
    return CartEvents()


@pytest.fixture
def store(storage, events, notices):
    """Loaded cart store over in-memory storage"""
    cart_store = CartStore(storage, events=events, notices=notices)
    cart_store.load()
    return cart_store


@pytest.fixture
def sample_product():
    """Catalog tuple as handed to add_item"""
    return {
        "id": "1",
        "title": "X",
        "price": 10,
        "image": "i",
        "platform": "PC",
    }


@pytest.fixture
def other_product():
    return {
        "id": "3",
        "title": "Neon Racers: Miami Nights",
        "price": "39.99",
        "image": "https://example.com/neon.jpg",
    }


@pytest.fixture
def app(test_settings):
    """App wired to a fresh in-memory store"""
    cart_store = CartStore(MemoryStorage(), events=CartEvents(), notices=NoticeBoard())
    return create_app(settings=test_settings, store=cart_store)


@pytest.fixture
def client(app):
    """Test client"""
    return TestClient(app)
