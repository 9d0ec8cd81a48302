"""Catalog package: demo product provider plus filter/sort rules."""
from typing import List, Optional

from . import data
from .filters import ProductFilter, SORT_OPTIONS, build_filter
from .models import Category, DemoOrder, Product, Testimonial


class Catalog:
    """Read-only provider over the hardcoded demo data."""

    def __init__(self, products: Optional[List[dict]] = None):
        self._products = [Product(**p) for p in (products if products is not None else data.PRODUCTS)]

    def all(self) -> List[Product]:
        return list(self._products)

    def featured(self) -> List[Product]:
        featured_ids = {p["id"] for p in data.FEATURED_PRODUCTS}
        return [p for p in self._products if p.id in featured_ids]

    def get_by_id(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def get_by_slug(self, slug: str) -> Product:
        """Product for a slug; unknown slugs fall back to the first product."""
        return next((p for p in self._products if p.slug == slug), self._products[0])

    def related(self, limit: int = 4) -> List[Product]:
        return self._products[:limit]

    def wishlist(self) -> List[Product]:
        return self._products[:3]

    def search(self, product_filter: ProductFilter) -> List[Product]:
        return product_filter.apply(self._products)

    @staticmethod
    def categories() -> List[Category]:
        return [Category(**c) for c in data.CATEGORIES]

    @staticmethod
    def testimonials() -> List[Testimonial]:
        return [Testimonial(**t) for t in data.TESTIMONIALS]

    @staticmethod
    def orders() -> List[DemoOrder]:
        return [DemoOrder(**o) for o in data.ORDERS]

    @staticmethod
    def filter_options() -> dict:
        return {key: list(values) for key, values in data.FILTER_OPTIONS.items()}


__all__ = [
    "Catalog",
    "Category",
    "DemoOrder",
    "Product",
    "ProductFilter",
    "SORT_OPTIONS",
    "Testimonial",
    "build_filter",
]
