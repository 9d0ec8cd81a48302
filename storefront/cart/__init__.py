"""Cart package: models, pricing, storage, store, presentation and events."""
from .models import LineItem, CartState
from .pricing import PromoRule, PricingSnapshot, calculate_pricing, build_promo_rules
from .storage import CartStorage, FileStorage, MemoryStorage, RedisStorage, create_storage
from .events import CartEvents, CartUpdated, EventLog
from .store import CartStore
from .presentation import CartPresenter, CartView
from .commands import ACTIONS, dispatch

__all__ = [
    "LineItem",
    "CartState",
    "PromoRule",
    "PricingSnapshot",
    "calculate_pricing",
    "build_promo_rules",
    "CartStorage",
    "FileStorage",
    "MemoryStorage",
    "RedisStorage",
    "create_storage",
    "CartEvents",
    "CartUpdated",
    "EventLog",
    "CartStore",
    "CartPresenter",
    "CartView",
    "ACTIONS",
    "dispatch",
]
