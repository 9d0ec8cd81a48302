"""
Page Router

Server-rendered storefront pages. Cart surfaces (badges, mini cart, full
cart, summary) come pre-rendered from the presenter's current view.
"""
import secrets
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from storefront.app import ShopContext
from storefront.catalog import SORT_OPTIONS, build_filter
from storefront.templating import templates
from .deps import get_shop, get_theme

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def _render(request: Request, shop: ShopContext, theme: str, template: str, **context):
    base = {
        "theme": theme,
        "cart": shop.presenter.view,
        "currency": shop.store.currency,
    }
    base.update(context)
    return templates.TemplateResponse(request, template, base)


@router.get("/")
async def home(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(
        request, shop, theme, "pages/home.html",
        featured_games=shop.catalog.featured(),
        categories=shop.catalog.categories(),
        testimonials=shop.catalog.testimonials(),
    )


@router.get("/products")
async def products(
    request: Request,
    category: Optional[List[str]] = Query(None),
    platform: Optional[List[str]] = Query(None),
    genre: Optional[List[str]] = Query(None),
    price_min: Optional[str] = Query(None),
    price_max: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    sort: Optional[str] = Query(None),
    shop: ShopContext = Depends(get_shop),
    theme: str = Depends(get_theme),
):
    product_filter = build_filter(category, platform, genre, price_min, price_max, search, sort)
    return _render(
        request, shop, theme, "pages/products.html",
        products=shop.catalog.search(product_filter),
        total_products=len(shop.catalog.all()),
        filters=shop.catalog.filter_options(),
        active_filter=product_filter,
        sort_options=SORT_OPTIONS,
    )


@router.get("/product/{slug}")
async def product_detail(
    slug: str, request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)
):
    return _render(
        request, shop, theme, "pages/product_detail.html",
        product=shop.catalog.get_by_slug(slug),
        related_products=shop.catalog.related(),
    )


@router.get("/cart")
async def cart(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(request, shop, theme, "pages/cart.html")


@router.get("/checkout")
async def checkout(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(request, shop, theme, "pages/checkout.html")


@router.get("/checkout/success")
async def checkout_success(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(
        request, shop, theme, "pages/checkout_success.html",
        order_number="#" + secrets.token_hex(4).upper(),
    )


@router.get("/account")
async def account(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(request, shop, theme, "pages/account/profile.html")


@router.get("/account/orders")
async def account_orders(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(request, shop, theme, "pages/account/orders.html", orders=shop.catalog.orders())


@router.get("/account/wishlist")
async def account_wishlist(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(request, shop, theme, "pages/account/wishlist.html", wishlist=shop.catalog.wishlist())


@router.get("/login")
async def login(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(request, shop, theme, "pages/auth/login.html")


@router.get("/register")
async def register(request: Request, shop: ShopContext = Depends(get_shop), theme: str = Depends(get_theme)):
    return _render(request, shop, theme, "pages/auth/register.html")
