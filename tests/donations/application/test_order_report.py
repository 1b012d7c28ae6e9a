"""Application tests for the monthly order report."""

from datetime import UTC, date, datetime

import pytest
from donations.order.order import BulkOrder
from donations.order.report import order_report
from protean import current_domain
from protean.exceptions import ValidationError


def _store_order(order_date, status="Pending", quantity=10, total_price=50.0, owner_email="donor@example.com"):
    order = BulkOrder.place(
        owner_email=owner_email,
        food_name="Rice",
        customer_email="kitchen@example.com",
        quantity=quantity,
        total_price=total_price,
        delivery_date=date(2026, 3, 1),
        delivery_address="12 Main St",
    )
    order.order_date = order_date
    if status != "Pending":
        order.change_status(status)
    current_domain.repository_for(BulkOrder).insert(order)
    return order


class TestOrderReport:
    def test_totals_for_month(self):
        _store_order(datetime(2026, 2, 1, 0, 0, tzinfo=UTC), quantity=10, total_price=50.0)
        _store_order(datetime(2026, 2, 14, 12, 0, tzinfo=UTC), status="Delivered", quantity=5, total_price=25.5)
        _store_order(datetime(2026, 2, 28, 23, 59, tzinfo=UTC), status="Cancelled", quantity=100, total_price=999.0)

        report = order_report("donor@example.com", "2026-02")

        assert report.total_orders == 3
        assert report.total_quantity == 15
        assert report.total_revenue == 75.5
        assert report.by_status == {"Pending": 1, "Confirmed": 0, "Delivered": 1, "Cancelled": 1}

    def test_other_months_and_owners_excluded(self):
        _store_order(datetime(2026, 1, 31, 23, 59, tzinfo=UTC))
        _store_order(datetime(2026, 3, 1, 0, 0, tzinfo=UTC))
        _store_order(datetime(2026, 2, 10, tzinfo=UTC), owner_email="other@example.com")

        report = order_report("donor@example.com", "2026-02")

        assert report.total_orders == 0
        assert report.total_revenue == 0.0

    def test_report_serialises(self):
        data = order_report("donor@example.com", "2026-02").to_dict()
        assert data["owner_email"] == "donor@example.com"
        assert data["month"] == "2026-02"
        assert set(data["by_status"]) == {"Pending", "Confirmed", "Delivered", "Cancelled"}

    def test_malformed_month(self):
        with pytest.raises(ValidationError):
            order_report("donor@example.com", "February")
