"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, List, Mapping, Optional

from storefront.money import parse_decimal, multiply

DEFAULT_PLATFORM = "PC"


@dataclass
class LineItem:
    """Single product entry in the cart."""
    id: str
    title: str
    price: Decimal
    image: str = ""
    platform: str = DEFAULT_PLATFORM
    quantity: int = 1

    def __post_init__(self):
        self.id = str(self.id) if self.id is not None else ""
        if not self.id:
            raise ValueError("id must be a non-empty string")
        if not self.title or not isinstance(self.title, str):
            raise ValueError("title must be a non-empty string")
        self.price = parse_decimal(self.price)
        if self.price < 0:
            raise ValueError("price must be a non-negative number")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("quantity must be a positive integer")
        self.image = self.image or ""
        self.platform = self.platform or DEFAULT_PLATFORM

    @property
    def line_total(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.price, self.quantity)

    def copy(self) -> "LineItem":
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to the persisted/JSON form."""
        return {
            "id": self.id,
            "title": self.title,
            "price": str(self.price),
            "image": self.image,
            "platform": self.platform,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineItem":
        """
        Create from a persisted dict.

        Raises:
            KeyError, TypeError, ValueError: on missing or invalid fields
        """
        return cls(
            id=data["id"],
            title=data["title"],
            price=data["price"],
            image=data.get("image", ""),
            platform=data.get("platform") or DEFAULT_PLATFORM,
            quantity=data["quantity"],
        )

    @classmethod
    def from_product(cls, product: Any) -> "LineItem":
        """
        Build a fresh line (quantity 1) from a catalog product.

        Accepts a mapping with id/title/price/image/platform keys or any
        object exposing those attributes.
        """
        if isinstance(product, Mapping):
            get = product.get
        else:
            def get(name, default=None):
                return getattr(product, name, default)

        return cls(
            id=get("id"),
            title=get("title"),
            price=get("price"),
            image=get("image") or "",
            platform=get("platform") or DEFAULT_PLATFORM,
            quantity=1,
        )


@dataclass
class CartState:
    """Line items in insertion order plus the session promo code."""
    items: List[LineItem] = field(default_factory=list)
    promo_code: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Total number of units in the cart."""
        return sum(item.quantity for item in self.items)

    def find(self, item_id: str) -> Optional[LineItem]:
        return next((item for item in self.items if item.id == item_id), None)

    def snapshot(self) -> "CartState":
        """Deep copy safe to hand to readers."""
        return CartState(items=[item.copy() for item in self.items], promo_code=self.promo_code)

    def items_to_list(self) -> List[dict]:
        return [item.to_dict() for item in self.items]

    @classmethod
    def items_from_list(cls, data: Any) -> List[LineItem]:
        """
        Parse a persisted items array.

        Raises:
            TypeError, KeyError, ValueError: if the payload is not a valid items
                array (wrong shape, invalid field, duplicate id)
        """
        if not isinstance(data, list):
            raise TypeError(f"items must be a list, got {type(data).__name__}")
        items: List[LineItem] = []
        seen = set()
        for entry in data:
            if not isinstance(entry, Mapping):
                raise TypeError(f"item must be an object, got {type(entry).__name__}")
            item = LineItem.from_dict(entry)
            if item.id in seen:
                raise ValueError(f"duplicate item id {item.id}")
            seen.add(item.id)
            items.append(item)
        return items
