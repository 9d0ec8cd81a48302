"""Application settings read from environment variables."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ROOT_DIR = Path(__file__).resolve().parent.parent

STORAGE_BACKENDS = ("file", "redis", "memory")


def _get_env(*keys: str, default: Optional[str] = None) -> Optional[str]:
    """First non-empty value among the given environment variables."""
    for k in keys:
        v = os.environ.get(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


@dataclass(frozen=True)
class Settings:
    storage_backend: str
    storage_path: str
    storage_key: str
    redis_url: str
    redis_token: str
    promo_codes: str
    currency: str
    default_language: str


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Raises:
        ValueError: if CART_STORAGE_BACKEND names an unknown backend
    """
    backend = (_get_env("CART_STORAGE_BACKEND", default="file") or "file").lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(
            f"CART_STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}, got {backend!r}"
        )

    return Settings(
        storage_backend=backend,
        storage_path=_get_env("CART_STORAGE_PATH", default=str(ROOT_DIR / "data")) or "",
        storage_key=_get_env("CART_STORAGE_KEY", default="gta6_cart") or "gta6_cart",
        redis_url=_get_env("UPSTASH_REDIS_REST_URL", default="") or "",
        redis_token=_get_env("UPSTASH_REDIS_REST_TOKEN", default="") or "",
        promo_codes=_get_env("PROMO_CODES", default="") or "",
        currency=(_get_env("CURRENCY", default="USD") or "USD").upper(),
        default_language=_get_env("DEFAULT_LANGUAGE", default="en") or "en",
    )
