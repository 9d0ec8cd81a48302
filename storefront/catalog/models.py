"""Catalog Models - Pydantic models for demo catalog entities."""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.money import to_decimal as _to_decimal


class Product(BaseModel):
    """Game product."""
    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    slug: str
    description: str = ""
    price: Decimal
    old_price: Optional[Decimal] = None
    image: str = ""
    badge: Optional[str] = None  # NEW, SALE
    platform: str = "PC"
    rating: float = 0.0
    sales: int = 0
    featured: bool = False
    category: str = ""
    genres: List[str] = []
    release_date: date

    @field_validator("price", "old_price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        if v is None:
            return None
        return _to_decimal(v)

    def cart_payload(self) -> dict:
        """Fields the cart needs when this product is added."""
        return {
            "id": self.id,
            "title": self.title,
            "price": str(self.price),
            "image": self.image,
            "platform": self.platform,
        }


class Category(BaseModel):
    name: str
    slug: str
    count: int = 0
    image: str = ""


class Testimonial(BaseModel):
    text: str
    author: str
    role: str = ""
    avatar: str = ""
    rating: int = 5


class OrderLine(BaseModel):
    title: str
    price: Decimal
    image: str = ""


class DemoOrder(BaseModel):
    id: str
    date: date
    status: str  # delivered, processing
    total: Decimal
    items: List[OrderLine] = []
