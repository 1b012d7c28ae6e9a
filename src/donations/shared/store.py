"""Document-store operations shared by the custom repositories.

Handlers talk to listings, requests and orders through the same small
surface: ``find``/``count`` over a ``QueryDescriptor``, ``find_one`` by id,
``insert``, ``update`` with an explicit ``upsert`` flag, and ``delete``.
SQL driver faults are re-raised as ``StoreFailure``.
"""

import functools
from dataclasses import dataclass

import structlog
from protean.core.repository import BaseRepository
from protean.exceptions import ObjectNotFoundError
from sqlalchemy.exc import SQLAlchemyError

from donations.browse.query import Page, QueryDescriptor
from donations.shared.exceptions import StoreFailure

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class WriteResult:
    matched: int
    modified: int
    upserted_id: str | None = None


def store_operation(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error("Store operation failed", operation=method.__name__, error=str(exc))
            raise StoreFailure(f"Store operation '{method.__name__}' failed") from exc

    return wrapper


class DocumentStore(BaseRepository):
    """Base for the custom repositories; builds on ``_dao``, ``get`` and ``add``."""

    def _query(self, descriptor: QueryDescriptor):
        query = self._dao.query
        criteria = descriptor.criteria()
        if criteria is not None:
            query = query.filter(criteria)
        return query

    @store_operation
    def find(self, descriptor: QueryDescriptor) -> Page:
        result = (
            self._query(descriptor)
            .order_by(descriptor.ordering)
            .offset(descriptor.skip)
            .limit(descriptor.limit)
            .all()
        )
        return Page(
            items=list(result.items),
            current_page=descriptor.page,
            items_per_page=descriptor.page_size,
            total_items=result.total,
        )

    @store_operation
    def count(self, descriptor: QueryDescriptor) -> int:
        return self._query(descriptor).all().total

    @store_operation
    def find_one(self, identifier):
        try:
            return self.get(identifier)
        except ObjectNotFoundError:
            return None

    @store_operation
    def insert(self, aggregate) -> str:
        self.add(aggregate)
        return str(aggregate.id)

    @store_operation
    def update(self, identifier, fields: dict, upsert: bool = False) -> WriteResult:
        """Apply ``fields`` to a stored aggregate.

        With ``upsert=True`` a missing aggregate is created from ``fields``;
        otherwise a miss reports ``matched=0`` and writes nothing.
        """
        aggregate = self.find_one(identifier)
        if aggregate is None:
            if not upsert:
                return WriteResult(matched=0, modified=0)
            aggregate = self._new(identifier, fields)
            self.add(aggregate)
            return WriteResult(matched=0, modified=0, upserted_id=str(aggregate.id))

        modified = self._apply(aggregate, fields)
        if modified:
            self.add(aggregate)
        return WriteResult(matched=1, modified=int(modified))

    @store_operation
    def delete(self, identifier) -> int:
        aggregate = self.find_one(identifier)
        if aggregate is None:
            return 0
        self._dao.delete(aggregate)
        return 1

    def _apply(self, aggregate, fields: dict) -> bool:
        changed = False
        for name, value in fields.items():
            if getattr(aggregate, name) != value:
                setattr(aggregate, name, value)
                changed = True
        return changed

    def _new(self, identifier, fields: dict):
        raise NotImplementedError(f"{type(self).__name__} does not support upserts")
