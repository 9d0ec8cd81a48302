"""
Durable key/value storage for the cart.

Backends:
- FileStorage: one JSON document per key in a local directory
- RedisStorage: Upstash Redis over REST (sync client)
- MemoryStorage: process-local dict, for tests and ephemeral demos
"""
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from upstash_redis import Redis

from storefront.config import Settings
from storefront.errors import StorageError
from storefront.logging import get_logger

logger = get_logger(__name__)


class CartStorage:
    """Synchronous string key/value store."""

    name = "abstract"

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(CartStorage):
    name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage(CartStorage):
    """Stores each key as ``<directory>/<key>.json``, written atomically."""

    name = "file"

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        safe_key = "".join(c if c.isalnum() or c in "-_" else "_" for c in key)
        return self.directory / f"{safe_key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".cart-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {key}: {e}") from e


class RedisStorage(CartStorage):
    """
    Upstash Redis backed storage.

    Each call is a blocking REST round-trip; the cart routes run store
    operations on a worker thread. Any client error is reported as
    StorageError so the store can fall back to its in-memory state.
    """

    name = "redis"

    def __init__(self, client: Redis):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisStorage":
        if not settings.redis_url or not settings.redis_token:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        return cls(Redis(url=settings.redis_url, token=settings.redis_token))

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(key)
        except Exception as e:
            raise StorageError(f"Redis GET {key} failed: {e}") from e
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(key, value)
        except Exception as e:
            raise StorageError(f"Redis SET {key} failed: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except Exception as e:
            raise StorageError(f"Redis DEL {key} failed: {e}") from e


def create_storage(settings: Settings) -> CartStorage:
    """Instantiate the backend named by CART_STORAGE_BACKEND."""
    if settings.storage_backend == "redis":
        storage: CartStorage = RedisStorage.from_settings(settings)
    elif settings.storage_backend == "memory":
        storage = MemoryStorage()
    else:
        storage = FileStorage(settings.storage_path)
    logger.info(f"Cart storage backend: {storage.name}")
    return storage
