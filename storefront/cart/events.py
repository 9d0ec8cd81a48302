"""
Cart event broadcasting.

Listeners run synchronously in registration order. Delivery is best-effort:
a listener that raises is logged and skipped.
"""
from collections import deque
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Deque, List, Tuple

from storefront.logging import get_logger
from .models import LineItem

logger = get_logger(__name__)

CART_UPDATED = "cart:updated"


@dataclass(frozen=True)
class CartUpdated:
    items: Tuple[LineItem, ...]
    total: Decimal
    name: str = CART_UPDATED

    def to_dict(self) -> dict:
        return {
            "event": self.name,
            "items": [item.to_dict() for item in self.items],
            "total": str(self.total),
        }


Listener = Callable[[CartUpdated], None]


class CartEvents:
    """Fire-and-forget notifier for cart changes."""

    def __init__(self):
        self._listeners: List[Listener] = []

    def on(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def off() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return off

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, event: CartUpdated) -> int:
        """
        Deliver an event to every listener.

        Returns:
            Number of listeners that handled the event without raising
        """
        delivered = 0
        for listener in list(self._listeners):
            try:
                listener(event)
                delivered += 1
            except Exception as e:
                logger.warning(f"Cart event listener {listener!r} failed: {e}", exc_info=True)
        logger.debug(f"Emitted {event.name} to {delivered}/{len(self._listeners)} listener(s)")
        return delivered


class EventLog:
    """
    Bounded history of cart events for polling clients.

    Each recorded event gets an increasing sequence number; clients ask for
    everything after the last number they saw.
    """

    def __init__(self, maxlen: int = 50):
        self._entries: Deque[Tuple[int, CartUpdated]] = deque(maxlen=maxlen)
        self._seq = 0

    def __call__(self, event: CartUpdated) -> None:
        self._seq += 1
        self._entries.append((self._seq, event))

    @property
    def last_seq(self) -> int:
        return self._seq

    def since(self, seq: int = 0) -> List[dict]:
        return [
            {"seq": entry_seq, **event.to_dict()}
            for entry_seq, event in self._entries
            if entry_seq > seq
        ]
