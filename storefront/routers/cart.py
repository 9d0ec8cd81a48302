"""
Cart Router

Shopping cart endpoints. Every response carries the freshly rendered cart
view (items, pricing, fragments per mount point) and the notices raised by
the operation.

Store calls can block on storage (Upstash is a REST round-trip), so each
operation runs on a worker thread via asyncio.to_thread. The shop lock lets
one operation, response included, finish before the next one starts.
"""
import asyncio
from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.app import ShopContext
from storefront.cart import dispatch
from storefront.errors import (
    ERROR_CART_UNAVAILABLE,
    ERROR_INVALID_PROMO,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_PROMO_LOCKED,
    UnknownActionError,
)
from storefront.logging import get_logger
from .deps import get_shop
from .models import AddToCartRequest, ApplyPromoRequest, CartActionRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


async def _run(shop: ShopContext, operation: Callable[[], Any]) -> Any:
    """Run a cart operation off the event loop, one at a time."""
    def locked():
        with shop.lock:
            return operation()

    return await asyncio.to_thread(locked)


def _cart_response(shop: ShopContext, result: Any = None) -> dict:
    """Current view plus drained notices."""
    response = shop.presenter.view.to_dict()
    response["notices"] = [notice.to_dict() for notice in shop.store.notices.drain()]
    response["event_seq"] = shop.event_log.last_seq
    if result is not None:
        response["result"] = result
    return response


def _resolve_product(shop: ShopContext, product_id: Optional[str]) -> dict:
    product = shop.catalog.get_by_id(product_id) if product_id else None
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product.cart_payload()


@router.get("")
async def get_cart(shop: ShopContext = Depends(get_shop)):
    """Get the cart with pricing and rendered fragments."""
    return await _run(shop, lambda: _cart_response(shop))


@router.post("/add")
async def add_to_cart(request: AddToCartRequest, shop: ShopContext = Depends(get_shop)):
    """Add one unit of a catalog product."""
    product = _resolve_product(shop, request.product_id)

    def operation():
        shop.store.add_item(product)
        return _cart_response(shop)

    try:
        return await _run(shop, operation)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))


@router.patch("/item")
async def update_cart_item(request: UpdateCartItemRequest, shop: ShopContext = Depends(get_shop)):
    """Update line quantity (0 = remove). Unknown lines are ignored."""
    def operation():
        changed = shop.store.update_quantity(request.product_id, request.quantity)
        return _cart_response(shop, result={"changed": changed})

    return await _run(shop, operation)


@router.delete("/item")
async def remove_cart_item(product_id: str = Query(...), shop: ShopContext = Depends(get_shop)):
    """Remove a line. Unknown lines are ignored."""
    def operation():
        removed = shop.store.remove_item(product_id)
        return _cart_response(shop, result={"changed": removed})

    return await _run(shop, operation)


@router.post("/clear")
async def clear_cart(shop: ShopContext = Depends(get_shop)):
    """Empty the cart and drop the promo code."""
    def operation():
        shop.store.clear()
        return _cart_response(shop)

    return await _run(shop, operation)


@router.post("/promo/apply")
async def apply_cart_promo(request: ApplyPromoRequest, shop: ShopContext = Depends(get_shop)):
    """Apply promo code to cart."""
    def operation():
        was_locked = shop.store.promo_locked
        if not shop.store.apply_promo_code(request.code):
            shop.store.notices.drain()
            raise HTTPException(
                status_code=400,
                detail=ERROR_PROMO_LOCKED if was_locked else ERROR_INVALID_PROMO,
            )
        return _cart_response(shop)

    return await _run(shop, operation)


@router.post("/actions/{action}")
async def run_cart_action(
    action: str,
    request: Optional[CartActionRequest] = None,
    shop: ShopContext = Depends(get_shop),
):
    """Run a UI action from the dispatch table (data-action identifiers)."""
    payload = request.to_payload() if request else {}

    if action == "add-to-cart":
        payload = {"product": _resolve_product(shop, payload.get("product_id") or payload.get("id"))}

    def operation():
        result = dispatch(shop.store, action, payload)
        if hasattr(result, "to_dict"):
            result = result.to_dict()
        return _cart_response(shop, result=result)

    try:
        return await _run(shop, operation)
    except UnknownActionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Cart action {action} failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_UNAVAILABLE)


@router.get("/events")
async def get_cart_events(since: int = Query(0, ge=0), shop: ShopContext = Depends(get_shop)):
    """Cart update events after a sequence number (polling)."""
    return await _run(shop, lambda: {
        "events": shop.event_log.since(since),
        "last_seq": shop.event_log.last_seq,
    })
