"""Query building and pagination for browse endpoints.

A ``QueryBuilder`` turns raw query-string parameters into a bounded
``QueryDescriptor``. Building never fails: anything malformed falls back to
the builder's defaults. Repositories consume the descriptor through
``criteria()`` (a Protean ``Q`` tree), ``ordering`` and ``skip``/``limit``,
and return a ``Page``.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from protean.utils.query import Q

MAX_PAGE_SIZE = 100
# Keeps skip within a 64-bit database offset
MAX_PAGE = 100_000


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


class Lookup(Enum):
    EXACT = "exact"
    ICONTAINS = "icontains"


@dataclass(frozen=True)
class Predicate:
    """Match ``value`` against one field, or any of several fields (OR)."""

    fields: tuple[str, ...]
    lookup: Lookup
    value: Any

    def to_q(self) -> Q:
        clauses = [Q(**{f"{name}__{self.lookup.value}": self.value}) for name in self.fields]
        criteria = clauses[0]
        for clause in clauses[1:]:
            criteria = criteria | clause
        return criteria


@dataclass(frozen=True)
class SortSpec:
    field: str
    direction: SortDirection = SortDirection.DESC

    @property
    def token(self) -> str:
        """``order_by`` token understood by Protean querysets."""
        return self.field if self.direction is SortDirection.ASC else f"-{self.field}"


@dataclass(frozen=True)
class QueryDescriptor:
    filters: dict[str, Predicate]
    sort: SortSpec
    page: int = 1
    page_size: int = 12

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def ordering(self) -> str:
        return self.sort.token

    def criteria(self) -> Q | None:
        """AND of every predicate, or ``None`` when nothing filters."""
        criteria = None
        for predicate in self.filters.values():
            clause = predicate.to_q()
            criteria = clause if criteria is None else criteria & clause
        return criteria


@dataclass
class Page:
    """One page of results plus the metadata browse clients need."""

    items: list
    current_page: int
    items_per_page: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.items_per_page)

    @property
    def has_next_page(self) -> bool:
        return self.current_page * self.items_per_page < self.total_items

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1

    def pagination(self) -> dict:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }


def _positive_int(value) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(str(value).strip())
    except ValueError:
        return None
    return number if number > 0 else None


def _text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class QueryBuilder:
    """Builds descriptors for one collection.

    ``sort_fields`` maps accepted ``sortBy`` tokens to stored field names, so
    clients can only sort on whitelisted fields.
    """

    default_page_size: int
    default_sort: SortSpec
    sort_fields: dict[str, str] = field(default_factory=dict)
    search_fields: tuple[str, ...] = ()
    location_field: str | None = None
    status_field: str | None = "status"

    def build(self, raw_params: Mapping[str, Any] | None = None, **scope) -> QueryDescriptor:
        params = raw_params or {}

        page = min(_positive_int(params.get("page")) or 1, MAX_PAGE)
        page_size = (
            _positive_int(params.get("pageSize"))
            or _positive_int(params.get("page_size"))
            or _positive_int(params.get("limit"))
            or self.default_page_size
        )
        page_size = min(page_size, MAX_PAGE_SIZE)

        filters: dict[str, Predicate] = {}

        status = _text(params.get("status"))
        if status and self.status_field:
            filters["status"] = Predicate((self.status_field,), Lookup.EXACT, status)

        location = _text(params.get("location"))
        if location and self.location_field:
            filters["location"] = Predicate((self.location_field,), Lookup.ICONTAINS, location)

        search = _text(params.get("search"))
        if search and self.search_fields:
            filters["search"] = Predicate(self.search_fields, Lookup.ICONTAINS, search)

        # Scope filters come from the caller, never from the query string
        for name, value in scope.items():
            filters[name] = Predicate((name,), Lookup.EXACT, value)

        sort = self._sort(
            params.get("sortBy") or params.get("sort_by"),
            params.get("sortOrder") or params.get("sort_order"),
        )
        return QueryDescriptor(filters=filters, sort=sort, page=page, page_size=page_size)

    def _sort(self, sort_by, sort_order) -> SortSpec:
        field_name = self.sort_fields.get(_text(sort_by) or "")
        if field_name is None:
            return self.default_sort

        direction = SortDirection.ASC if sort_order == "asc" else SortDirection.DESC
        return SortSpec(field_name, direction)


LISTING_QUERY = QueryBuilder(
    default_page_size=12,
    default_sort=SortSpec("created_at", SortDirection.DESC),
    sort_fields={
        "price": "price",
        "quantity": "quantity",
        "expiryDate": "expiry_date",
        "expiry_date": "expiry_date",
        "foodName": "food_name",
        "food_name": "food_name",
        "createdAt": "created_at",
        "created_at": "created_at",
    },
    search_fields=("food_name", "location"),
    location_field="location",
)

ORDER_QUERY = QueryBuilder(
    default_page_size=10,
    default_sort=SortSpec("order_date", SortDirection.DESC),
    sort_fields={
        "orderDate": "order_date",
        "order_date": "order_date",
        "deliveryDate": "delivery_date",
        "delivery_date": "delivery_date",
        "totalPrice": "total_price",
        "total_price": "total_price",
        "quantity": "quantity",
    },
    search_fields=("food_name", "customer_name"),
    location_field="delivery_address",
)

REQUEST_QUERY = QueryBuilder(
    default_page_size=10,
    default_sort=SortSpec("requested_at", SortDirection.DESC),
    sort_fields={"requestedAt": "requested_at", "requested_at": "requested_at"},
    status_field=None,
)
