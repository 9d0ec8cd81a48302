"""
Cart command dispatch.

The UI tags controls with ``data-action`` identifiers; the web layer decodes
the payload and calls the matching handler, which invokes one named store
operation.
"""
from typing import Any, Callable, Dict, Mapping

from storefront.errors import UnknownActionError
from storefront.logging import get_logger, sanitize_string_for_logging
from .store import CartStore

logger = get_logger(__name__)

Handler = Callable[[CartStore, Mapping[str, Any]], Any]


def _require_id(payload: Mapping[str, Any]) -> str:
    item_id = payload.get("id")
    if item_id is None or str(item_id).strip() == "":
        raise ValueError("id is required")
    return str(item_id)


def _require_quantity(payload: Mapping[str, Any]) -> int:
    raw = payload.get("quantity")
    if isinstance(raw, bool):
        raise ValueError("quantity must be an integer")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValueError("quantity must be an integer")


def _add_to_cart(store: CartStore, payload: Mapping[str, Any]):
    product = payload.get("product", payload)
    return store.add_item(product)


def _remove_item(store: CartStore, payload: Mapping[str, Any]):
    return store.remove_item(_require_id(payload))


def _increase_qty(store: CartStore, payload: Mapping[str, Any]):
    return store.increase_quantity(_require_id(payload))


def _decrease_qty(store: CartStore, payload: Mapping[str, Any]):
    return store.decrease_quantity(_require_id(payload))


def _set_quantity(store: CartStore, payload: Mapping[str, Any]):
    return store.update_quantity(_require_id(payload), _require_quantity(payload))


def _apply_promo(store: CartStore, payload: Mapping[str, Any]):
    code = payload.get("code")
    if not isinstance(code, str) or not code.strip():
        raise ValueError("code is required")
    return store.apply_promo_code(code)


def _clear_cart(store: CartStore, payload: Mapping[str, Any]):
    store.clear()
    return True


ACTIONS: Dict[str, Handler] = {
    "add-to-cart": _add_to_cart,
    "remove-item": _remove_item,
    "increase-qty": _increase_qty,
    "decrease-qty": _decrease_qty,
    "set-quantity": _set_quantity,
    "apply-promo": _apply_promo,
    "clear-cart": _clear_cart,
}


def dispatch(store: CartStore, action: str, payload: Mapping[str, Any] | None = None) -> Any:
    """
    Run a cart action by identifier.

    Raises:
        UnknownActionError: if the action is not registered
        ValueError: if the payload is missing required fields
    """
    handler = ACTIONS.get(action)
    if handler is None:
        logger.warning(f"Unknown cart action: {sanitize_string_for_logging(action, 30)}")
        raise UnknownActionError(action)
    return handler(store, payload or {})
