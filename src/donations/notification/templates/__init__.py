"""Template registry: maps NotificationType to template classes."""

from donations.notification.templates.bulk_order import BulkOrderTemplate
from donations.notification.templates.food_request import FoodRequestTemplate
from donations.notification.types import NotificationType

TEMPLATE_REGISTRY: dict[str, type] = {
    NotificationType.FOOD_REQUESTED.value: FoodRequestTemplate,
    NotificationType.BULK_ORDER_PLACED.value: BulkOrderTemplate,
}


def get_template(notification_type: str):
    """Look up a template class by notification type string."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
