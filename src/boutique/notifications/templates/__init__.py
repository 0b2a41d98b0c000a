"""Message templates rendered for the notification sink."""

from boutique.notifications.templates.order_summary import OrderSummaryTemplate

__all__ = ["OrderSummaryTemplate"]
