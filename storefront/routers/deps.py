"""
Shared Dependencies for Routers

Everything is built once in storefront.app.build_context and read back from
app.state here.
"""
from fastapi import Request

from storefront.app import ShopContext
from storefront.catalog import Catalog
from storefront.theme import THEME_COOKIE, resolve_theme


def get_shop(request: Request) -> ShopContext:
    return request.app.state.shop


def get_catalog(request: Request) -> Catalog:
    return get_shop(request).catalog


def get_theme(request: Request) -> str:
    return resolve_theme(request.cookies.get(THEME_COOKIE))
