"""Bulk order template: sent to the listing owner when an order is placed."""

from html import escape

from donations.notification.templates._layout import FOOTER, box, fmt_date, notes_row, page, row
from donations.notification.types import NotificationType


class BulkOrderTemplate:
    notification_type = NotificationType.BULK_ORDER_PLACED.value

    @staticmethod
    def render(context: dict) -> dict:
        owner_name = context.get("owner_name") or context.get("owner_email") or "there"
        food_name = context.get("food_name", "N/A")
        quantity = context.get("quantity", "N/A")
        total_price = float(context.get("total_price") or 0.0)
        customer_name = context.get("customer_name") or "N/A"
        customer_email = context.get("customer_email", "N/A")
        delivery_date = fmt_date(context.get("delivery_date"))
        delivery_address = context.get("delivery_address", "N/A")
        notes = context.get("notes")

        html = page(
            "New Bulk Order!",
            owner_name,
            [f"You have received a new bulk order for <strong>{escape(food_name)}</strong>."],
            [
                box(
                    "Order Details",
                    [
                        row("Food Item", food_name),
                        row("Quantity", quantity),
                        row("Total Price", f"${total_price:.2f}"),
                        row("Delivery Date", delivery_date),
                        row("Delivery Address", delivery_address),
                    ],
                ),
                box(
                    "Customer Information",
                    [
                        row("Name", customer_name),
                        row("Email", customer_email),
                        notes_row("Order Notes", notes),
                    ],
                ),
            ],
            ["Please confirm the order and arrange delivery with the customer."],
        )

        lines = [
            f"Hello {owner_name},",
            "",
            f"You have received a new bulk order for {food_name}.",
            "",
            "ORDER DETAILS:",
            f"- Food Item: {food_name}",
            f"- Quantity: {quantity}",
            f"- Total Price: ${total_price:.2f}",
            f"- Delivery Date: {delivery_date}",
            f"- Delivery Address: {delivery_address}",
            "",
            "CUSTOMER INFORMATION:",
            f"- Name: {customer_name}",
            f"- Email: {customer_email}",
        ]
        if notes:
            lines.append(f"- Order Notes: {notes}")
        lines += [
            "",
            "Please confirm the order and arrange delivery with the customer.",
            "",
            "---",
            FOOTER,
        ]

        return {
            "subject": f"New Bulk Order - {food_name}",
            "html": html,
            "text": "\n".join(lines),
        }
