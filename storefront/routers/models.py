"""
Storefront API Pydantic Models

Request bodies for the cart endpoints.
"""
from typing import Any, Dict

from pydantic import BaseModel


class AddToCartRequest(BaseModel):
    product_id: str


class UpdateCartItemRequest(BaseModel):
    product_id: str
    quantity: int  # 0 removes the line


class ApplyPromoRequest(BaseModel):
    code: str


class CartActionRequest(BaseModel):
    """Payload for /api/cart/actions/{action}; fields depend on the action."""
    id: str | None = None
    quantity: Any = None
    code: str | None = None
    product_id: str | None = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
