"""
FastAPI Routers Package

All routers are included by storefront.app.create_app.
"""

from storefront.routers.cart import router as cart_router
from storefront.routers.catalog import router as catalog_router
from storefront.routers.pages import router as pages_router
from storefront.routers.theme import router as theme_router

__all__ = [
    "cart_router",
    "catalog_router",
    "pages_router",
    "theme_router",
]
