"""
Storefront FastAPI application factory.

Builds the single cart store for the process, wires its presenter and event
log, and mounts the page, catalog, cart and theme routers.
"""
import threading
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.cart import (
    CartEvents,
    CartPresenter,
    CartStore,
    EventLog,
    build_promo_rules,
    create_storage,
)
from storefront.catalog import Catalog
from storefront.config import Settings, load_settings
from storefront.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ShopContext:
    """Process-wide collaborators handed to the routers via app.state."""
    settings: Settings
    store: CartStore
    presenter: CartPresenter
    event_log: EventLog
    catalog: Catalog
    # Serializes cart operations, which run on worker threads
    lock: threading.Lock = field(default_factory=threading.Lock)


def build_context(settings: Optional[Settings] = None, store: Optional[CartStore] = None) -> ShopContext:
    """
    Construct the shop's collaborators once.

    Args:
        settings: Settings to use (default: read from environment)
        store: Pre-built store (tests); otherwise one is created from settings
    """
    settings = settings or load_settings()

    if store is None:
        store = CartStore(
            create_storage(settings),
            storage_key=settings.storage_key,
            rules=build_promo_rules(settings.promo_codes),
            events=CartEvents(),
            currency=settings.currency,
            lang=settings.default_language,
        )

    presenter = CartPresenter(currency=store.currency, lang=store.lang)
    presenter.attach(store)

    event_log = EventLog()
    store.events.on(event_log)

    store.load()
    store.notices.drain()

    return ShopContext(
        settings=settings,
        store=store,
        presenter=presenter,
        event_log=event_log,
        catalog=Catalog(),
    )


def create_app(settings: Optional[Settings] = None, store: Optional[CartStore] = None) -> FastAPI:
    """Create the FastAPI application with one cart store for its lifetime."""
    from storefront.routers import cart_router, catalog_router, pages_router, theme_router

    app = FastAPI(
        title="Neon E-Shop",
        description="Cyberpunk game storefront with cart and promo pricing",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.shop = build_context(settings, store)

    app.include_router(pages_router)
    app.include_router(catalog_router)
    app.include_router(cart_router)
    app.include_router(theme_router)

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok", "storage": app.state.shop.store.storage.name}

    logger.info("Storefront app created")
    return app
