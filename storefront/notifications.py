"""
Shopper notices (toast messages).

The cart store posts notices here; the web layer drains them into each
response so the page can show a toast that dismisses itself after a delay.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List

from storefront.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DISMISS_MS = 3000


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    message: str
    level: NoticeLevel = NoticeLevel.SUCCESS
    dismiss_after_ms: int = DEFAULT_DISMISS_MS

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "level": self.level.value,
            "dismiss_after_ms": self.dismiss_after_ms,
        }


class NoticeBoard:
    """Pending notices, in the order they were posted."""

    def __init__(self):
        self._pending: List[Notice] = []

    def post(self, message: str, level: NoticeLevel = NoticeLevel.SUCCESS) -> Notice:
        notice = Notice(message=message, level=NoticeLevel(level))
        self._pending.append(notice)
        logger.debug(f"Notice posted ({notice.level.value}): {message}")
        return notice

    def success(self, message: str) -> Notice:
        return self.post(message, NoticeLevel.SUCCESS)

    def info(self, message: str) -> Notice:
        return self.post(message, NoticeLevel.INFO)

    def warning(self, message: str) -> Notice:
        return self.post(message, NoticeLevel.WARNING)

    def error(self, message: str) -> Notice:
        return self.post(message, NoticeLevel.ERROR)

    @property
    def pending(self) -> List[Notice]:
        return list(self._pending)

    def drain(self) -> List[Notice]:
        """Return and forget all pending notices."""
        notices, self._pending = self._pending, []
        return notices

    def __len__(self) -> int:
        return len(self._pending)
