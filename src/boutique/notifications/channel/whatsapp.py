"""WhatsApp click-to-chat adapter.

Builds a ``wa.me`` link carrying the message and hands it to an opener,
which in the storefront is the shopper's browser. Delivery happens when
the shopper sends the pre-filled chat.
"""

import webbrowser
from collections.abc import Callable
from urllib.parse import quote

import structlog

from boutique.notifications.channel.port import NotificationSink

logger = structlog.get_logger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"


def whatsapp_url(phone: str, message: str) -> str:
    """Click-to-chat URL for ``phone`` (digits only, no leading +)."""
    return f"{WHATSAPP_BASE_URL}/{phone.lstrip('+')}?text={quote(message, safe='')}"


class WhatsAppLinkSink(NotificationSink):
    def __init__(self, phone: str, opener: Callable[[str], bool] | None = None) -> None:
        self.phone = phone
        self._opener = opener or (lambda url: webbrowser.open(url, new=2))

    def dispatch(self, message: str) -> bool:
        url = whatsapp_url(self.phone, message)
        opened = bool(self._opener(url))
        if not opened:
            logger.warning("WhatsApp link could not be opened", phone=self.phone)
        return opened
