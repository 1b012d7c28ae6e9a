"""Food request template: sent to the donor when a listing is requested."""

from html import escape

from donations.notification.templates._layout import FOOTER, box, fmt_date, notes_row, page, row
from donations.notification.types import NotificationType


class FoodRequestTemplate:
    notification_type = NotificationType.FOOD_REQUESTED.value

    @staticmethod
    def render(context: dict) -> dict:
        donor_name = context.get("donor_name") or context.get("donor_email") or "there"
        food_name = context.get("food_name", "N/A")
        quantity = context.get("quantity", "N/A")
        location = context.get("location", "N/A")
        requester_email = context.get("requester_email", "N/A")
        request_date = fmt_date(context.get("requested_at"))
        note = context.get("note")

        html = page(
            "New Food Request!",
            donor_name,
            ["Great news! Someone has requested your food donation."],
            [
                box(
                    "Food Details",
                    [row("Food Item", food_name), row("Quantity", quantity), row("Pickup Location", location)],
                ),
                box(
                    "Requester Information",
                    [
                        row("Email", requester_email),
                        row("Request Date", request_date),
                        notes_row("Additional Notes", note),
                    ],
                ),
            ],
            [
                "Please coordinate with the requester to arrange the pickup. You can reach them at "
                f'<a href="mailto:{escape(requester_email)}" style="color: #f59e0b;">{escape(requester_email)}</a>',
                "Thank you for your generosity in sharing food with those in need!",
            ],
        )

        lines = [
            f"Hello {donor_name},",
            "",
            "Great news! Someone has requested your food donation.",
            "",
            "FOOD DETAILS:",
            f"- Food Item: {food_name}",
            f"- Quantity: {quantity}",
            f"- Pickup Location: {location}",
            "",
            "REQUESTER INFORMATION:",
            f"- Email: {requester_email}",
            f"- Request Date: {request_date}",
        ]
        if note:
            lines.append(f"- Additional Notes: {note}")
        lines += [
            "",
            "Please coordinate with the requester to arrange the pickup.",
            "",
            "Thank you for your generosity in sharing food with those in need!",
            "",
            "---",
            FOOTER,
        ]

        return {
            "subject": f"New Food Request - {food_name}",
            "html": html,
            "text": "\n".join(lines),
        }
