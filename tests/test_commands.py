"""Tests for cart action dispatch"""
import pytest

from storefront.cart import ACTIONS, dispatch
from storefront.errors import UnknownActionError


def test_action_table():
    assert set(ACTIONS) == {
        "add-to-cart",
        "remove-item",
        "increase-qty",
        "decrease-qty",
        "set-quantity",
        "apply-promo",
        "clear-cart",
    }


def test_add_to_cart(store, sample_product):
    line = dispatch(store, "add-to-cart", {"product": sample_product})
    assert line.id == "1"
    dispatch(store, "add-to-cart", sample_product)
    assert store.get_item("1").quantity == 2


def test_quantity_buttons(store, sample_product):
    store.add_item(sample_product)

    dispatch(store, "increase-qty", {"id": "1"})
    dispatch(store, "increase-qty", {"id": 1})
    assert store.get_item("1").quantity == 3

    dispatch(store, "decrease-qty", {"id": "1"})
    assert store.get_item("1").quantity == 2


def test_set_quantity_parses_strings(store, sample_product):
    """Quantity inputs arrive as text"""
    store.add_item(sample_product)

    assert dispatch(store, "set-quantity", {"id": "1", "quantity": " 5 "}) is True
    assert store.get_item("1").quantity == 5

    dispatch(store, "set-quantity", {"id": "1", "quantity": "0"})
    assert store.items == ()


@pytest.mark.parametrize("payload", [
    {"id": "1", "quantity": "abc"},
    {"id": "1", "quantity": None},
    {"id": "1", "quantity": True},
    {"id": "1", "quantity": "1.5"},
    {"quantity": 2},
    {"id": "  ", "quantity": 2},
])
def test_set_quantity_invalid(store, sample_product, payload):
    store.add_item(sample_product)
    with pytest.raises(ValueError):
        dispatch(store, "set-quantity", payload)
    assert store.get_item("1").quantity == 1


def test_remove_item(store, sample_product):
    store.add_item(sample_product)
    assert dispatch(store, "remove-item", {"id": "1"}) is True
    assert dispatch(store, "remove-item", {"id": "1"}) is False


def test_apply_promo(store, sample_product):
    store.add_item(sample_product)
    assert dispatch(store, "apply-promo", {"code": "hire_sami"}) is True
    assert store.promo_code == "HIRE_SAMI"


def test_apply_promo_requires_code(store):
    with pytest.raises(ValueError):
        dispatch(store, "apply-promo", {})


def test_clear_cart(store, sample_product):
    store.add_item(sample_product)
    assert dispatch(store, "clear-cart") is True
    assert store.items == ()


def test_unknown_action(store):
    with pytest.raises(UnknownActionError) as exc_info:
        dispatch(store, "checkout-now", {})
    assert exc_info.value.action == "checkout-now"
    assert "Unknown cart action" in str(exc_info.value)
