from enum import Enum


class NotificationType(Enum):
    FOOD_REQUESTED = "Food_Requested"
    BULK_ORDER_PLACED = "Bulk_Order_Placed"
