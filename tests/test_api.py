"""Tests for API endpoints"""
import asyncio
import threading

import pytest
from fastapi.testclient import TestClient

from storefront.app import create_app
from storefront.cart import CartStore, MemoryStorage
from storefront.theme import THEME_COOKIE


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "storage": "memory"}


class TestCatalogAPI:
    """Tests for /api/products"""

    def test_list_products(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 6
        assert data["sort"] == "featured"
        assert data["products"][0]["price"] == 59.99
        assert data["products"][0]["release_date"] == "2024-11-01"

    def test_list_products_filtered(self, client):
        response = client.get(
            "/api/products",
            params={"category": ["action", "racing"], "sort": "price-asc"},
        )
        ids = [p["id"] for p in response.json()["products"]]
        assert ids == ["5", "3", "4", "1"]

    def test_get_product(self, client):
        response = client.get("/api/products/3")
        assert response.status_code == 200
        assert response.json()["title"] == "Neon Racers: Miami Nights"

    def test_get_product_not_found(self, client):
        response = client.get("/api/products/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    @pytest.mark.parametrize("params", [
        {"price_min": "nan"},
        {"price_max": "NaN"},
        {"price_min": "Infinity", "price_max": "abc"},
    ])
    def test_bad_price_bounds_ignored(self, client, params):
        """Bad price bounds fall back to the default range instead of failing"""
        response = client.get("/api/products", params=params)
        assert response.status_code == 200
        assert response.json()["count"] == 6

        page = client.get("/products", params=params)
        assert page.status_code == 200


class TestCartAPI:
    """Tests for /api/cart"""

    def test_empty_cart(self, client):
        data = client.get("/api/cart").json()
        assert data["items"] == []
        assert data["is_empty"] is True
        assert data["badge_visible"] is False
        assert data["pricing"]["total"] == 0.0
        assert data["notices"] == []

    def test_add_to_cart(self, client):
        response = client.post("/api/cart/add", json={"product_id": "5"})
        assert response.status_code == 200
        data = response.json()

        assert data["item_count"] == 1
        assert data["items"][0]["title"] == "Urban Warriors"
        assert data["pricing"]["subtotal"] == 29.99
        assert data["pricing"]["shipping"] == 5.99
        assert data["pricing"]["total"] == 38.98
        assert data["notices"][0]["message"] == "Added to cart!"
        assert data["notices"][0]["level"] == "success"
        assert "Urban Warriors" in data["fragments"]["mini_items"]["mini-cart"]

    def test_notices_are_delivered_once(self, client):
        client.post("/api/cart/add", json={"product_id": "5"})
        assert client.get("/api/cart").json()["notices"] == []

    def test_add_unknown_product(self, client):
        response = client.post("/api/cart/add", json={"product_id": "999"})
        assert response.status_code == 404

    def test_add_missing_body_field(self, client):
        response = client.post("/api/cart/add", json={})
        assert response.status_code == 422

    def test_update_quantity(self, client):
        client.post("/api/cart/add", json={"product_id": "1"})
        data = client.patch("/api/cart/item", json={"product_id": "1", "quantity": 3}).json()

        assert data["result"] == {"changed": True}
        assert data["items"][0]["quantity"] == 3

    def test_update_requires_quantity(self, client):
        """A PATCH without quantity is rejected and leaves the line alone"""
        client.post("/api/cart/add", json={"product_id": "1"})
        client.patch("/api/cart/item", json={"product_id": "1", "quantity": 3})

        response = client.patch("/api/cart/item", json={"product_id": "1"})

        assert response.status_code == 422
        assert client.get("/api/cart").json()["items"][0]["quantity"] == 3

    def test_update_quantity_zero_removes(self, client):
        client.post("/api/cart/add", json={"product_id": "1"})
        data = client.patch("/api/cart/item", json={"product_id": "1", "quantity": 0}).json()
        assert data["items"] == []

    def test_remove_missing_item(self, client):
        response = client.delete("/api/cart/item", params={"product_id": "missing-id"})
        assert response.status_code == 200
        assert response.json()["result"] == {"changed": False}

    def test_clear(self, client):
        client.post("/api/cart/add", json={"product_id": "1"})
        data = client.post("/api/cart/clear").json()
        assert data["items"] == []
        assert data["notices"][-1]["message"] == "Cart cleared"


class TestPromoAPI:
    """Tests for /api/cart/promo/apply"""

    def test_apply_waiver(self, client):
        client.post("/api/cart/add", json={"product_id": "1"})
        response = client.post("/api/cart/promo/apply", json={"code": "hire_sami"})

        assert response.status_code == 200
        data = response.json()
        assert data["pricing"]["total"] == 0.0
        assert data["show_discount"] is True
        assert data["promo"]["code"] == "HIRE_SAMI"
        assert data["promo"]["locked"] is True
        assert data["notices"][-1]["message"] == "🎉 Promo code applied! Total is now $0.00!"

    def test_invalid_code(self, client):
        client.post("/api/cart/add", json={"product_id": "1"})
        response = client.post("/api/cart/promo/apply", json={"code": "NOPE"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid promo code"
        assert client.get("/api/cart").json()["promo"]["code"] is None

    def test_second_code_rejected(self, client):
        client.post("/api/cart/add", json={"product_id": "1"})
        client.post("/api/cart/promo/apply", json={"code": "HIRE_SAMI"})
        response = client.post("/api/cart/promo/apply", json={"code": "HIRE_SAMI"})

        assert response.status_code == 400
        assert response.json()["detail"] == "A promo code is already applied"


class TestCartActionsAPI:
    """Tests for /api/cart/actions/{action}"""

    def test_add_and_increase(self, client):
        client.post("/api/cart/actions/add-to-cart", json={"product_id": "2"})
        data = client.post("/api/cart/actions/increase-qty", json={"id": "2"}).json()

        assert data["result"] is True
        assert data["items"][0]["quantity"] == 2

    def test_add_returns_line(self, client):
        data = client.post("/api/cart/actions/add-to-cart", json={"id": "2"}).json()
        assert data["result"]["id"] == "2"
        assert data["result"]["price"] == "49.99"

    def test_set_quantity_from_text(self, client):
        client.post("/api/cart/actions/add-to-cart", json={"product_id": "2"})
        data = client.post("/api/cart/actions/set-quantity", json={"id": "2", "quantity": "4"}).json()
        assert data["items"][0]["quantity"] == 4

    def test_set_quantity_invalid(self, client):
        client.post("/api/cart/actions/add-to-cart", json={"product_id": "2"})
        response = client.post("/api/cart/actions/set-quantity", json={"id": "2", "quantity": "lots"})
        assert response.status_code == 400

    def test_clear_without_body(self, client):
        client.post("/api/cart/actions/add-to-cart", json={"product_id": "2"})
        data = client.post("/api/cart/actions/clear-cart").json()
        assert data["items"] == []

    def test_unknown_action(self, client):
        response = client.post("/api/cart/actions/explode", json={})
        assert response.status_code == 404
        assert "Unknown cart action" in response.json()["detail"]

    def test_add_unknown_product(self, client):
        response = client.post("/api/cart/actions/add-to-cart", json={"product_id": "999"})
        assert response.status_code == 404


class TestCartEventsAPI:
    """Tests for /api/cart/events"""

    def test_events_after_changes(self, client):
        client.post("/api/cart/add", json={"product_id": "1"})
        client.post("/api/cart/add", json={"product_id": "1"})

        data = client.get("/api/cart/events").json()
        assert data["last_seq"] == 2
        assert [e["event"] for e in data["events"]] == ["cart:updated", "cart:updated"]
        assert data["events"][-1]["items"][0]["quantity"] == 2

        newer = client.get("/api/cart/events", params={"since": 1}).json()
        assert [e["seq"] for e in newer["events"]] == [2]

    def test_invalid_code_not_broadcast(self, client):
        client.post("/api/cart/promo/apply", json={"code": "NOPE"})
        assert client.get("/api/cart/events").json()["events"] == []


class TestPages:
    """Tests for server-rendered pages"""

    @pytest.mark.parametrize("path", [
        "/",
        "/products",
        "/product/vice-city-heist",
        "/cart",
        "/checkout",
        "/checkout/success",
        "/account",
        "/account/orders",
        "/account/wishlist",
        "/login",
        "/register",
    ])
    def test_page_renders(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    def test_home_lists_featured(self, client):
        html = client.get("/").text
        assert "Cyberpunk Vice City 2077" in html
        assert 'data-action="add-to-cart"' in html

    def test_empty_cart_page(self, client):
        assert "Your cart is empty" in client.get("/cart").text

    def test_cart_page_after_add(self, client):
        client.post("/api/cart/add", json={"product_id": "3"})
        html = client.get("/cart").text

        assert "Neon Racers: Miami Nights" in html
        assert 'data-cart-badge="header"' in html
        assert "Your cart is empty" not in html

    def test_unknown_slug_shows_first_product(self, client):
        html = client.get("/product/no-such-game").text
        assert "<h1>Cyberpunk Vice City 2077</h1>" in html

    def test_products_page_filters(self, client):
        html = client.get("/products", params={"search": "miami"}).text
        assert "Neon Racers: Miami Nights" in html
        assert "Urban Warriors" not in html

    def test_order_number(self, client):
        html = client.get("/checkout/success").text
        assert "data-order-number>#" in html


class TestTheme:
    """Tests for the theme toggle"""

    def test_default_theme(self, client):
        assert 'data-theme="dark"' in client.get("/").text

    def test_toggle_sets_cookie(self, client):
        response = client.post("/theme/toggle")
        assert response.json() == {"theme": "light"}
        assert response.cookies.get(THEME_COOKIE) == "light"

        assert 'data-theme="light"' in client.get("/").text
        assert client.post("/theme/toggle").json() == {"theme": "dark"}


class RecordingStorage(MemoryStorage):
    """Remembers whether each write ran on the event loop thread"""

    def __init__(self):
        super().__init__()
        self.writes_on_loop = []

    def set(self, key, value):
        try:
            asyncio.get_running_loop()
            self.writes_on_loop.append(True)
        except RuntimeError:
            self.writes_on_loop.append(False)
        super().set(key, value)


class TestCartConcurrency:
    """Tests for how cart routes run store operations"""

    def test_storage_writes_run_off_event_loop(self, test_settings):
        storage = RecordingStorage()
        app = create_app(settings=test_settings, store=CartStore(storage))
        client = TestClient(app)

        client.post("/api/cart/add", json={"product_id": "1"})
        client.post("/api/cart/actions/increase-qty", json={"id": "1"})
        client.post("/api/cart/clear")

        assert storage.writes_on_loop == [False, False, False]

    def test_operations_wait_for_lock(self, app, client):
        """A cart operation does not start while another holds the shop lock"""
        shop = app.state.shop
        results = []

        with shop.lock:
            worker = threading.Thread(
                target=lambda: results.append(client.post("/api/cart/add", json={"product_id": "1"}))
            )
            worker.start()
            worker.join(timeout=0.3)
            assert results == []
            assert shop.store.items == ()

        worker.join(timeout=5)
        assert results[0].status_code == 200
        assert shop.store.get_item("1").quantity == 1
