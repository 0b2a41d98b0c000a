"""Order summary template — the message sent to the shop when an order is placed."""


class OrderSummaryTemplate:
    def __init__(self, shop_name: str, currency_label: str) -> None:
        self.shop_name = shop_name
        self.currency_label = currency_label

    def money(self, amount: int) -> str:
        return f"{self.currency_label} {amount}"

    def render(self, submission) -> str:
        identity = submission.identity
        products = "\n".join(
            f"• {line.product.name} x{line.quantity} - {self.money(line.line_total)}"
            for line in submission.lines
        )
        return (
            f"🛍️ *NEW ORDER FROM {self.shop_name.upper()}* 🛍️\n\n"
            "*Customer Details:*\n"
            f"Name: {identity.name}\n"
            f"Email: {identity.email}\n"
            f"Phone: {identity.phone}\n"
            f"Delivery Address: {identity.address}\n\n"
            "*Order Summary:*\n"
            f"{products}\n\n"
            f"*Subtotal:* {self.money(submission.subtotal)}\n"
            f"*Delivery Fee:* {self.money(submission.delivery_fee)}\n"
            f"*TOTAL:* {self.money(submission.grand_total)}\n\n"
            "Thank you for your order!"
        )
