"""
Catalog filtering and sorting.

Mirrors the shop's filter sidebar: any-of matching within a facet, all facets
combined, an inclusive price range and a title/description search.
"""
from decimal import Decimal
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ValidationInfo, field_validator

from storefront.money import parse_decimal
from .models import Product

SORT_FEATURED = "featured"

SORT_OPTIONS = {
    "featured": "Featured",
    "price-asc": "Price: Low to High",
    "price-desc": "Price: High to Low",
    "name-asc": "Name: A to Z",
    "name-desc": "Name: Z to A",
    "newest": "Newest",
    "rating": "Top Rated",
}

DEFAULT_PRICE_MIN = Decimal("0")
DEFAULT_PRICE_MAX = Decimal("100")


def _split_values(v) -> List[str]:
    """Accept ["a", "b"], "a,b" or None."""
    if v is None:
        return []
    if isinstance(v, str):
        v = [v]
    values: List[str] = []
    for entry in v:
        values.extend(part.strip() for part in str(entry).split(",") if part.strip())
    return values


class ProductFilter(BaseModel):
    category: List[str] = []
    platform: List[str] = []
    genre: List[str] = []
    price_min: Decimal = DEFAULT_PRICE_MIN
    price_max: Decimal = DEFAULT_PRICE_MAX
    search: str = ""
    sort: str = SORT_FEATURED

    @field_validator("category", "platform", "genre", mode="before")
    @classmethod
    def split_csv(cls, v):
        return _split_values(v)

    @field_validator("price_min", "price_max", mode="before")
    @classmethod
    def convert_to_decimal(cls, v, info: ValidationInfo):
        """Unparseable or non-finite bounds fall back to the default range."""
        fallback = DEFAULT_PRICE_MIN if info.field_name == "price_min" else DEFAULT_PRICE_MAX
        if v is None or (isinstance(v, str) and not v.strip()):
            return fallback
        try:
            return parse_decimal(v.strip() if isinstance(v, str) else v)
        except ValueError:
            return fallback

    @field_validator("search", mode="before")
    @classmethod
    def normalize_search(cls, v):
        return (v or "").strip().lower()

    @field_validator("sort", mode="before")
    @classmethod
    def normalize_sort(cls, v):
        return v if v in SORT_OPTIONS else SORT_FEATURED

    def matches(self, product: Product) -> bool:
        """True if the product passes every active facet."""
        if self.category and product.category.lower() not in {c.lower() for c in self.category}:
            return False

        if self.platform and product.platform.lower() not in {p.lower() for p in self.platform}:
            return False

        if self.genre:
            wanted = {g.lower() for g in self.genre}
            if not any(g.lower() in wanted for g in product.genres):
                return False

        if product.price < self.price_min or product.price > self.price_max:
            return False

        if self.search:
            in_title = self.search in product.title.lower()
            in_description = self.search in (product.description or "").lower()
            if not in_title and not in_description:
                return False

        return True

    def sort_products(self, products: Iterable[Product]) -> List[Product]:
        products = list(products)
        if self.sort == "price-asc":
            return sorted(products, key=lambda p: p.price)
        if self.sort == "price-desc":
            return sorted(products, key=lambda p: p.price, reverse=True)
        if self.sort == "name-asc":
            return sorted(products, key=lambda p: p.title.lower())
        if self.sort == "name-desc":
            return sorted(products, key=lambda p: p.title.lower(), reverse=True)
        if self.sort == "newest":
            return sorted(products, key=lambda p: p.release_date, reverse=True)
        if self.sort == "rating":
            return sorted(products, key=lambda p: p.rating or 0, reverse=True)
        # featured first, original order otherwise (sorted is stable)
        return sorted(products, key=lambda p: not p.featured)

    def apply(self, products: Iterable[Product]) -> List[Product]:
        """Filter then sort."""
        return self.sort_products(p for p in products if self.matches(p))


def build_filter(
    category: Optional[Union[str, List[str]]] = None,
    platform: Optional[Union[str, List[str]]] = None,
    genre: Optional[Union[str, List[str]]] = None,
    price_min: Optional[str] = None,
    price_max: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[str] = None,
) -> ProductFilter:
    """Build a filter from raw query-string values, skipping absent ones."""
    raw = {
        "category": category,
        "platform": platform,
        "genre": genre,
        "price_min": price_min,
        "price_max": price_max,
        "search": search,
        "sort": sort,
    }
    return ProductFilter(**{k: v for k, v in raw.items() if v is not None})
