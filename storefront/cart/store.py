"""
Cart store: the single writer of cart state.

Every mutation runs to completion before returning:
mutate -> persist -> re-render subscribers -> broadcast CartUpdated.
"""
import json
from typing import Any, Callable, List, Mapping, Optional, Tuple

from storefront.errors import StorageError
from storefront.i18n import get_text
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.money import format_money
from storefront.notifications import Notice, NoticeBoard, NoticeLevel
from .events import CartEvents, CartUpdated
from .models import CartState, LineItem
from .pricing import DEFAULT_PROMO_RULES, PricingSnapshot, PromoRule, calculate_pricing, normalize_code
from .storage import CartStorage

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "gta6_cart"

Subscriber = Callable[[CartState, PricingSnapshot], None]


class CartStore:
    """
    Owns the shopping cart for one session.

    Features:
    - Line items keyed by product id, quantities merged on re-add
    - Fail-soft load from durable storage
    - Promo codes (kept in memory only, never persisted)
    - Subscribers re-rendered and events broadcast after each change
    """

    def __init__(
        self,
        storage: CartStorage,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        rules: Optional[Mapping[str, PromoRule]] = None,
        events: Optional[CartEvents] = None,
        notices: Optional[NoticeBoard] = None,
        currency: str = "USD",
        lang: str = "en",
    ):
        self.storage = storage
        self.storage_key = storage_key
        self.rules = dict(rules) if rules is not None else dict(DEFAULT_PROMO_RULES)
        self.events = events if events is not None else CartEvents()
        self.notices = notices if notices is not None else NoticeBoard()
        self.currency = currency
        self.lang = lang
        self._state = CartState()
        self._promo_feedback: Optional[Notice] = None
        self._subscribers: List[Subscriber] = []

    # ==================== READ SIDE ====================

    @property
    def state(self) -> CartState:
        """Copy of the current state."""
        return self._state.snapshot()

    @property
    def items(self) -> Tuple[LineItem, ...]:
        return tuple(item.copy() for item in self._state.items)

    @property
    def promo_code(self) -> Optional[str]:
        return self._state.promo_code

    @property
    def promo_locked(self) -> bool:
        """True once a promo is applied; the promo input is disabled."""
        return self._state.promo_code is not None

    @property
    def promo_feedback(self) -> Optional[Notice]:
        """Inline message shown under the promo input, if any."""
        return self._promo_feedback

    @property
    def item_count(self) -> int:
        return self._state.item_count

    def get_item(self, item_id: str) -> Optional[LineItem]:
        item = self._state.find(item_id)
        return item.copy() if item else None

    def pricing(self) -> PricingSnapshot:
        """Fresh pricing for the current state (never cached)."""
        return calculate_pricing(self._state.items, self._state.promo_code, self.rules)

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """
        Register a presentation subscriber called after every change.

        Returns:
            Function that removes the subscriber
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    # ==================== PERSISTENCE ====================

    def load(self) -> CartState:
        """
        Load persisted items, replacing the in-memory cart.

        Missing, unreadable or malformed data yields an empty cart. The promo
        code always starts empty.
        """
        items: List[LineItem] = []
        try:
            raw = self.storage.get(self.storage_key)
            if raw:
                items = CartState.items_from_list(json.loads(raw))
        except StorageError as e:
            logger.warning(f"Cart storage unreadable, starting empty: {e}")
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Corrupted cart data under {self.storage_key}, starting empty: {e}")
            items = []

        self._state = CartState(items=items)
        self._promo_feedback = None
        logger.info(f"Cart loaded with {len(items)} line(s)")
        self._render()
        return self.state

    def _persist(self) -> bool:
        try:
            self.storage.set(self.storage_key, json.dumps(self._state.items_to_list()))
            return True
        except StorageError as e:
            logger.warning(f"Failed to save cart, keeping in-memory state: {e}")
            self.notices.warning(get_text("cart.save_failed", self.lang))
            return False

    def _render(self) -> None:
        state = self._state.snapshot()
        pricing = self.pricing()
        for subscriber in list(self._subscribers):
            try:
                subscriber(state, pricing)
            except Exception as e:
                logger.warning(f"Cart subscriber {subscriber!r} failed: {e}", exc_info=True)

    def _commit(self) -> None:
        saved = self._persist()
        self._render()
        if saved:
            self.events.emit(CartUpdated(items=self.items, total=self.pricing().total))

    # ==================== MUTATIONS ====================

    def add_item(self, product: Any) -> LineItem:
        """
        Add one unit of a product.

        Args:
            product: Mapping or object with id, title, price, image and
                optional platform (defaults to "PC")

        Returns:
            Copy of the resulting line

        Raises:
            ValueError: if the product data is invalid
        """
        incoming = LineItem.from_product(product)
        existing = self._state.find(incoming.id)

        if existing:
            existing.quantity += 1
            line = existing
        else:
            self._state.items.append(incoming)
            line = incoming

        logger.info(f"Added {sanitize_id_for_logging(line.id)} to cart (qty {line.quantity})")
        self._commit()
        self.notices.success(get_text("cart.added", self.lang))
        return line.copy()

    def remove_item(self, item_id: str) -> bool:
        """
        Remove a line. Unknown ids are ignored.

        Returns:
            True if a line was removed
        """
        if self._state.find(item_id) is None:
            return False

        self._state.items = [item for item in self._state.items if item.id != item_id]
        logger.info(f"Removed {sanitize_id_for_logging(item_id)} from cart")
        self._commit()
        self.notices.info(get_text("cart.removed", self.lang))
        return True

    def update_quantity(self, item_id: str, quantity: int) -> bool:
        """
        Set a line's quantity; zero or less removes the line.

        Returns:
            True if the cart changed

        Raises:
            ValueError: if quantity is not an integer
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError("quantity must be an integer")

        if quantity <= 0:
            return self.remove_item(item_id)

        item = self._state.find(item_id)
        if item is None:
            return False

        item.quantity = quantity
        self._commit()
        return True

    def increase_quantity(self, item_id: str) -> bool:
        item = self._state.find(item_id)
        if item is None:
            return False
        return self.update_quantity(item_id, item.quantity + 1)

    def decrease_quantity(self, item_id: str) -> bool:
        item = self._state.find(item_id)
        if item is None:
            return False
        return self.update_quantity(item_id, item.quantity - 1)

    def clear(self) -> None:
        """Empty the cart and drop any applied promo code."""
        self._state = CartState()
        self._promo_feedback = None
        logger.info("Cart cleared")
        self._commit()
        self.notices.info(get_text("cart.cleared", self.lang))

    def apply_promo_code(self, code: str) -> bool:
        """
        Apply a promo code (case and surrounding whitespace ignored).

        Returns:
            True if the code matched a rule and was applied
        """
        normalized = normalize_code(code)

        if self.promo_locked:
            self.notices.info(get_text("promo.locked", self.lang))
            return False

        rule = self.rules.get(normalized)
        if rule is None:
            logger.info(f"Rejected promo code {sanitize_string_for_logging(normalized, 20)}")
            self._promo_feedback = Notice(
                message=get_text("promo.invalid_message", self.lang),
                level=NoticeLevel.ERROR,
            )
            self.notices.error(get_text("promo.invalid", self.lang))
            self._render()
            return False

        self._state.promo_code = rule.code
        pricing = self.pricing()
        if rule.waives_all:
            feedback = get_text("promo.free_message", self.lang)
        else:
            feedback = get_text(
                "promo.discount_message",
                self.lang,
                code=rule.code,
                discount=format_money(pricing.discount, self.currency),
            )
        self._promo_feedback = Notice(message=feedback, level=NoticeLevel.SUCCESS)

        logger.info(f"Applied promo code {rule.code}")
        self._commit()
        self.notices.success(
            get_text("promo.applied", self.lang, total=format_money(pricing.total, self.currency))
        )
        return True
