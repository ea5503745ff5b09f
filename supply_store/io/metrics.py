"""Prometheus instrumentation for store operations."""

from __future__ import annotations

from prometheus_client import Counter, Gauge

operations_total = Counter(
    "supply_store_operations_total",
    "Entity store operations by outcome",
    ["entity", "operation", "outcome"],
)

records = Gauge(
    "supply_store_records",
    "Live records held by an entity store",
    ["entity"],
)


def record_op(entity: str, operation: str, found: bool = True) -> None:
    outcome = "ok" if found else "not_found"
    operations_total.labels(entity=entity, operation=operation, outcome=outcome).inc()


def set_size(entity: str, size: int) -> None:
    records.labels(entity=entity).set(size)
