"""Transport-agnostic request router.

Maps ``(method, path, body)`` onto the entity stores. Any HTTP framework can
hand requests to :meth:`Router.handle` and serialize the returned
:class:`Response`; this module never touches sockets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.types import ENTITY_TYPES
from ..core.utils import parse_id
from ..state.store import EntityStore, Stores
from ..validation.schema import from_payload, id_key, record_id_from_payload, to_payload

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

# URL segment -> entity name
RESOURCES: Dict[str, str] = {
    "headquarters": "headquarters",
    "branches": "branches",
    "suppliers": "suppliers",
    "products": "products",
    "orders": "orders",
    "order-details": "order_details",
    "deliveries": "deliveries",
    "order-detail-deliveries": "order_detail_deliveries",
}


@dataclass
class Response:
    status: int
    body: Any = None


def _error(status: int, message: str) -> Response:
    return Response(status, {"error": message})


class Router:
    def __init__(self, stores: Stores, validate: bool = True):
        self.stores = stores
        self.validate = validate

    def _resolve(self, path: str) -> tuple[Optional[EntityStore[Any]], Optional[str]]:
        parts = [p for p in path.split("?", 1)[0].split("/") if p]
        if not 2 <= len(parts) <= 3 or parts[0] != API_PREFIX.strip("/"):
            return None, None
        name = RESOURCES.get(parts[1])
        if name is None:
            return None, None
        return self.stores.by_name(name), parts[2] if len(parts) == 3 else None

    def handle(self, method: str, path: str, body: Any = None) -> Response:
        store, raw_id = self._resolve(path)
        if store is None:
            return _error(404, f"no route for {path}")
        method = method.upper()
        label = store.name.replace("_", " ")

        if raw_id is None:
            if method == "GET":
                return Response(200, [to_payload(r) for r in store.list()])
            if method == "POST":
                return self._insert(store, body)
            return _error(405, f"{method} not allowed on {path}")

        record_id = parse_id(raw_id)
        if record_id is None:
            return _error(404, f"{label}: invalid identifier '{raw_id}'")

        if method == "GET":
            record = store.get(record_id)
            if record is None:
                return _error(404, f"{label}: {record_id} not found")
            return Response(200, to_payload(record))
        if method == "PUT":
            return self._replace(store, label, record_id, body)
        if method == "DELETE":
            if store.remove(record_id) is None:
                return _error(404, f"{label}: {record_id} not found")
            return Response(204)
        return _error(405, f"{method} not allowed on {path}")

    def _build(self, store: EntityStore[Any], body: Any) -> Any:
        cls = ENTITY_TYPES[store.name]
        return from_payload(cls, body, strict=self.validate)

    def _insert(self, store: EntityStore[Any], body: Any) -> Response:
        try:
            record = self._build(store, body)
        except ValueError as exc:
            logger.info("%s: rejected insert: %s", store.name, exc)
            return _error(400, str(exc))
        store.insert(record)
        return Response(201, to_payload(record))

    def _replace(self, store: EntityStore[Any], label: str, record_id: int, body: Any) -> Response:
        cls = ENTITY_TYPES[store.name]
        if isinstance(body, dict):
            body_id = record_id_from_payload(cls, body)
            if body_id is None:
                body = {**body, id_key(cls): record_id}
            elif self.validate and body_id != record_id:
                return _error(400, f"identifier in body ({body_id}) does not match path ({record_id})")
        try:
            record = self._build(store, body)
        except ValueError as exc:
            logger.info("%s: rejected replace of %s: %s", store.name, record_id, exc)
            return _error(400, str(exc))
        if store.replace(record_id, record) is None:
            return _error(404, f"{label}: {record_id} not found")
        return Response(200, to_payload(record))
