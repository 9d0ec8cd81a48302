"""Tests for cart events"""
from decimal import Decimal

from storefront.cart import CartEvents, CartUpdated, EventLog, LineItem
from storefront.cart.events import CART_UPDATED


def _event(total="10"):
    return CartUpdated(items=(LineItem(id="1", title="X", price="10"),), total=Decimal(total))


def test_emit_to_all_listeners():
    events = CartEvents()
    received = []
    events.on(received.append)
    events.on(received.append)

    assert events.emit(_event()) == 2
    assert len(received) == 2


def test_failing_listener_is_skipped():
    """A raising listener does not stop delivery to the others"""
    events = CartEvents()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    events.on(broken)
    events.on(received.append)

    assert events.emit(_event()) == 1
    assert len(received) == 1


def test_off():
    events = CartEvents()
    off = events.on(lambda event: None)
    assert events.listener_count == 1
    off()
    off()
    assert events.listener_count == 0


def test_event_to_dict():
    data = _event("27.99").to_dict()
    assert data["event"] == CART_UPDATED == "cart:updated"
    assert data["total"] == "27.99"
    assert data["items"][0]["id"] == "1"


def test_event_log_since():
    log = EventLog()
    log(_event("1"))
    log(_event("2"))

    assert log.last_seq == 2
    assert [entry["seq"] for entry in log.since(0)] == [1, 2]
    assert [entry["total"] for entry in log.since(1)] == ["2"]
    assert log.since(2) == []


def test_event_log_is_bounded():
    log = EventLog(maxlen=3)
    for i in range(5):
        log(_event(str(i)))

    assert [entry["seq"] for entry in log.since()] == [3, 4, 5]
