"""Notification sinks — pluggable order-summary dispatch channels.

The storefront dispatches through a WhatsApp click-to-chat link; tests
substitute the fake sink.
"""

from boutique.config import StorefrontSettings
from boutique.notifications.channel.port import NotificationSink
from boutique.notifications.channel.whatsapp import WhatsAppLinkSink


def build_sink(settings: StorefrontSettings) -> NotificationSink:
    """Return the sink configured for the shop's WhatsApp number."""
    return WhatsAppLinkSink(phone=settings.whatsapp_number)
