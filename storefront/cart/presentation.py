"""
Presentation sync: projects cart state onto every UI surface.

A surface (badge, full item list, mini cart, summary) may be mounted in zero
or more places. Each sync renders every mount point from one state/pricing
pair into a fresh CartView and swaps it in whole, so readers never see a mix
of old and new fragments.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from jinja2 import Environment

from storefront.i18n import get_text
from storefront.logging import get_logger
from storefront.money import format_money, to_float
from storefront.notifications import Notice
from .models import CartState
from .pricing import EMPTY_PRICING, PricingSnapshot

logger = get_logger(__name__)

SURFACE_BADGE = "badge"
SURFACE_ITEMS = "items"
SURFACE_MINI_ITEMS = "mini_items"
SURFACE_SUMMARY = "summary"


@dataclass(frozen=True)
class Surface:
    name: str
    template: str
    mounts: Tuple[str, ...] = ()
    empty_template: Optional[str] = None


DEFAULT_SURFACES: Tuple[Surface, ...] = (
    Surface(SURFACE_BADGE, "cart/badge.html", mounts=("header", "mobile-nav")),
    Surface(SURFACE_ITEMS, "cart/items.html", mounts=("cart-page",), empty_template="cart/empty.html"),
    Surface(SURFACE_MINI_ITEMS, "cart/mini_items.html", mounts=("mini-cart",), empty_template="cart/mini_empty.html"),
    Surface(SURFACE_SUMMARY, "cart/summary.html", mounts=("cart-page", "checkout")),
)


@dataclass(frozen=True)
class CartView:
    """Everything the UI needs to show the cart, rendered from one snapshot."""
    version: int
    item_count: int
    is_empty: bool
    items: Tuple[Mapping[str, Any], ...]
    pricing: PricingSnapshot
    formatted: Mapping[str, str]
    show_discount: bool
    promo_code: Optional[str]
    promo_locked: bool
    promo_feedback: Optional[Notice]
    fragments: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    @property
    def badge_visible(self) -> bool:
        return self.item_count > 0

    def fragment(self, surface: str, mount: str) -> str:
        return self.fragments.get(surface, {}).get(mount, "")

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "item_count": self.item_count,
            "badge_visible": self.badge_visible,
            "is_empty": self.is_empty,
            "items": [dict(item) for item in self.items],
            "pricing": {
                "subtotal": to_float(self.pricing.subtotal),
                "shipping": to_float(self.pricing.shipping),
                "tax": to_float(self.pricing.tax),
                "discount": to_float(self.pricing.discount),
                "total": to_float(self.pricing.total),
            },
            "formatted": dict(self.formatted),
            "show_discount": self.show_discount,
            "promo": {
                "code": self.promo_code,
                "locked": self.promo_locked,
                "feedback": self.promo_feedback.to_dict() if self.promo_feedback else None,
            },
            "fragments": {name: dict(mounts) for name, mounts in self.fragments.items()},
        }


class CartPresenter:
    """Renders cart surfaces whenever the store it is attached to changes."""

    def __init__(
        self,
        env: Optional[Environment] = None,
        surfaces: Sequence[Surface] = DEFAULT_SURFACES,
        currency: str = "USD",
        lang: str = "en",
    ):
        if env is None:
            from storefront.templating import templates
            env = templates.env
        self.env = env
        self.surfaces: Dict[str, Surface] = {surface.name: surface for surface in surfaces}
        self.currency = currency
        self.lang = lang
        self._store = None
        self._unsubscribe = None
        self._view = self._build_view(CartState(), EMPTY_PRICING, version=0)

    @property
    def view(self) -> CartView:
        return self._view

    def attach(self, store) -> CartView:
        """Subscribe to a store and render its current state."""
        self.detach()
        self._store = store
        self._unsubscribe = store.subscribe(self.sync)
        return self.sync(store.state, store.pricing())

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = None
        self._store = None

    def sync(self, state: CartState, pricing: PricingSnapshot) -> CartView:
        """Render all surfaces for this state and publish the new view."""
        view = self._build_view(state, pricing, version=self._view.version + 1)
        self._view = view
        logger.debug(f"Cart view v{view.version}: {view.item_count} unit(s), total {view.formatted['total']}")
        return view

    def _format(self, value: Decimal) -> str:
        return format_money(value, self.currency)

    def _build_view(self, state: CartState, pricing: PricingSnapshot, version: int) -> CartView:
        items = tuple(
            MappingProxyType({
                "id": item.id,
                "title": item.title,
                "price": to_float(item.price),
                "image": item.image,
                "platform": item.platform,
                "quantity": item.quantity,
                "line_total": to_float(item.line_total),
                "line_total_display": self._format(item.line_total),
            })
            for item in state.items
        )
        formatted = MappingProxyType({
            "subtotal": self._format(pricing.subtotal),
            "shipping": self._format(pricing.shipping),
            "tax": self._format(pricing.tax),
            "discount": self._format(-pricing.discount),
            "total": self._format(pricing.total),
        })
        feedback = self._store.promo_feedback if self._store is not None else None

        context = {
            "items": items,
            "item_count": state.item_count,
            "is_empty": state.is_empty,
            "pricing": pricing,
            "formatted": formatted,
            "show_discount": pricing.has_discount,
            "promo_code": state.promo_code,
            "promo_locked": state.promo_code is not None,
            "promo_feedback": feedback,
            "currency": self.currency,
            "t": lambda key, **kwargs: get_text(key, self.lang, **kwargs),
        }

        fragments: Dict[str, Mapping[str, str]] = {}
        for surface in self.surfaces.values():
            template_name = surface.template
            if state.is_empty and surface.empty_template:
                template_name = surface.empty_template
            template = self.env.get_template(template_name)
            fragments[surface.name] = MappingProxyType({
                mount: template.render(context, mount=mount) for mount in surface.mounts
            })

        return CartView(
            version=version,
            item_count=state.item_count,
            is_empty=state.is_empty,
            items=items,
            pricing=pricing,
            formatted=formatted,
            show_discount=pricing.has_discount,
            promo_code=state.promo_code,
            promo_locked=state.promo_code is not None,
            promo_feedback=feedback,
            fragments=MappingProxyType(fragments),
        )
