"""User-facing notices — the short messages the storefront flashes to shoppers.

A notice never changes control flow; it only reports what happened.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import structlog

logger = structlog.get_logger(__name__)


class NoticeVariant(Enum):
    DEFAULT = "default"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notice:
    title: str
    description: str
    variant: NoticeVariant = NoticeVariant.DEFAULT


class NoticeBoard(ABC):
    """Abstract sink for notices shown to the shopper."""

    @abstractmethod
    def post(self, notice: Notice) -> None: ...


class LoggingNoticeBoard(NoticeBoard):
    """Writes notices to the log; used when no UI is attached."""

    def post(self, notice: Notice) -> None:
        log = logger.warning if notice.variant is NoticeVariant.DESTRUCTIVE else logger.info
        log(notice.title, description=notice.description, variant=notice.variant.value)


class RecordingNoticeBoard(NoticeBoard):
    """Keeps every posted notice in memory for test assertions."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def post(self, notice: Notice) -> None:
        self.notices.append(notice)

    @property
    def titles(self) -> list[str]:
        return [notice.title for notice in self.notices]

    def reset(self) -> None:
        self.notices.clear()


def stock_limit_reached(available: int) -> Notice:
    return Notice("Stock limit reached", f"Only {available} items are available.")


def added_to_cart(product_name: str) -> Notice:
    return Notice("Added to cart", f"{product_name} has been added to your cart.")


def removed_from_cart() -> Notice:
    return Notice("Removed from cart", "Item has been removed from your cart.")
