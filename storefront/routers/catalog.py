"""
Products API Router

Public JSON endpoints for the demo catalog.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.catalog import Catalog, Product, build_filter
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.money import to_float
from .deps import get_catalog

router = APIRouter(prefix="/api/products", tags=["products"])


def _product_response(product: Product) -> dict:
    return {
        "id": product.id,
        "title": product.title,
        "slug": product.slug,
        "description": product.description,
        "price": to_float(product.price),
        "old_price": to_float(product.old_price) if product.old_price is not None else None,
        "image": product.image,
        "badge": product.badge,
        "platform": product.platform,
        "rating": product.rating,
        "sales": product.sales,
        "featured": product.featured,
        "category": product.category,
        "genres": product.genres,
        "release_date": product.release_date.isoformat(),
    }


@router.get("")
async def list_products(
    category: Optional[List[str]] = Query(None, description="Comma-separated categories"),
    platform: Optional[List[str]] = Query(None, description="Comma-separated platforms"),
    genre: Optional[List[str]] = Query(None, description="Comma-separated genres"),
    price_min: Optional[str] = Query(None),
    price_max: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    sort: Optional[str] = Query(None, description="featured, price-asc, price-desc, name-asc, name-desc, newest, rating"),
    catalog: Catalog = Depends(get_catalog),
):
    """Filtered and sorted product list."""
    product_filter = build_filter(category, platform, genre, price_min, price_max, search, sort)
    products = catalog.search(product_filter)
    return {
        "products": [_product_response(p) for p in products],
        "count": len(products),
        "sort": product_filter.sort,
    }


@router.get("/{product_id}")
async def get_product(product_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get product by ID."""
    product = catalog.get_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return _product_response(product)
