"""Order store: owner queries and monthly report data over bulk orders."""

from donations.browse.query import MAX_PAGE_SIZE, ORDER_QUERY, Lookup, Predicate, QueryDescriptor
from donations.domain import donations
from donations.order.order import BulkOrder
from donations.shared.dates import month_bounds
from donations.shared.store import DocumentStore, store_operation


@donations.repository(part_of=BulkOrder)
class OrderRepository(DocumentStore):
    def owned_by(self, owner_email: str, raw_params=None):
        """Orders placed against one owner's listings, newest first by default."""
        return self.find(ORDER_QUERY.build(raw_params, owner_email=owner_email))

    @store_operation
    def placed_in_month(self, owner_email: str, month: str) -> list[BulkOrder]:
        """Every order of ``owner_email`` whose order date falls in ``month`` (YYYY-MM)."""
        start, end = month_bounds(month)
        descriptor = QueryDescriptor(
            filters={"owner_email": Predicate(("owner_email",), Lookup.EXACT, owner_email)},
            sort=ORDER_QUERY.default_sort,
        )
        query = self._query(descriptor).filter(order_date__gte=start, order_date__lt=end).order_by(descriptor.ordering)

        orders, offset = [], 0
        while True:
            result = query.offset(offset).limit(MAX_PAGE_SIZE).all()
            orders.extend(result.items)
            offset += MAX_PAGE_SIZE
            if offset >= result.total:
                return orders

    def _apply(self, order: BulkOrder, fields: dict) -> bool:
        return order.change_status(fields["status"])
