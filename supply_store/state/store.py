"""In-memory entity stores with reset-to-seed support.

Each store is a flat list scanned by identifier equality. Lookups, replaces
and removes act on the first matching record; duplicate identifiers are not
rejected on insert. A miss is reported by returning ``None``.
"""

from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass, fields
from typing import Any, Generic, Iterable, List, Optional, TypeVar

from ..core.types import (
    Branch,
    Delivery,
    Headquarters,
    Order,
    OrderDetail,
    OrderDetailDelivery,
    Product,
    Supplier,
)
from ..io.metrics import record_op, set_size

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityStore(Generic[T]):
    """Ordered collection of one entity type, guarded by its own lock."""

    def __init__(self, name: str, id_field: str, seed: Iterable[T] = ()):
        self.name = name
        self.id_field = id_field
        self._seed: List[T] = copy.deepcopy(list(seed))
        self._records: List[T] = copy.deepcopy(self._seed)
        self._lock = threading.Lock()
        set_size(self.name, len(self._records))

    def _index_of(self, record_id: Any) -> Optional[int]:
        for i, rec in enumerate(self._records):
            if getattr(rec, self.id_field) == record_id:
                return i
        return None

    def list(self) -> List[T]:
        with self._lock:
            record_op(self.name, "list")
            return list(self._records)

    def get(self, record_id: Any) -> Optional[T]:
        with self._lock:
            i = self._index_of(record_id)
            record_op(self.name, "get", i is not None)
            if i is None:
                logger.debug("%s: get %r not found", self.name, record_id)
                return None
            return self._records[i]

    def insert(self, record: T) -> T:
        # fail before touching the list if the record has no identifier
        record_id = getattr(record, self.id_field)
        with self._lock:
            self._records.append(record)
            record_op(self.name, "insert")
            set_size(self.name, len(self._records))
        logger.debug("%s: inserted %r", self.name, record_id)
        return record

    def replace(self, record_id: Any, record: T) -> Optional[T]:
        with self._lock:
            i = self._index_of(record_id)
            record_op(self.name, "replace", i is not None)
            if i is None:
                logger.debug("%s: replace %r not found", self.name, record_id)
                return None
            self._records[i] = record
        logger.debug("%s: replaced %r", self.name, record_id)
        return record

    def remove(self, record_id: Any) -> Optional[T]:
        with self._lock:
            i = self._index_of(record_id)
            record_op(self.name, "remove", i is not None)
            if i is None:
                logger.debug("%s: remove %r not found", self.name, record_id)
                return None
            removed = self._records.pop(i)
            set_size(self.name, len(self._records))
        logger.debug("%s: removed %r", self.name, record_id)
        return removed

    def reset(self) -> None:
        with self._lock:
            self._records = copy.deepcopy(self._seed)
            record_op(self.name, "reset")
            set_size(self.name, len(self._records))
        logger.info("%s: reset to %d seed records", self.name, len(self._seed))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return self._index_of(record_id) is not None


@dataclass
class Stores:
    """The eight entity stores, constructed together and passed around as one."""

    headquarters: EntityStore[Headquarters]
    branches: EntityStore[Branch]
    suppliers: EntityStore[Supplier]
    products: EntityStore[Product]
    orders: EntityStore[Order]
    order_details: EntityStore[OrderDetail]
    deliveries: EntityStore[Delivery]
    order_detail_deliveries: EntityStore[OrderDetailDelivery]

    def all(self) -> List[EntityStore[Any]]:
        return [getattr(self, f.name) for f in fields(self)]

    def by_name(self, name: str) -> Optional[EntityStore[Any]]:
        for store in self.all():
            if store.name == name:
                return store
        return None

    def reset_all(self) -> None:
        for store in self.all():
            store.reset()
