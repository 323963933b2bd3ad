from __future__ import annotations

from prometheus_client import Counter

ORDERS_CREATED_TOTAL = Counter(
    "restaurant_orders_created_total",
    "Total number of orders persisted.",
)

ORDERS_DELETED_TOTAL = Counter(
    "restaurant_orders_deleted_total",
    "Total number of orders removed.",
    ["mode"],
)

ORDER_DELETE_MISSES_TOTAL = Counter(
    "restaurant_order_delete_misses_total",
    "Total number of delete requests that matched no order.",
    ["mode"],
)

REPOSITORY_ERRORS_TOTAL = Counter(
    "restaurant_repository_errors_total",
    "Total number of storage failures surfaced to clients.",
    ["kind"],
)


def record_order_created() -> None:
    ORDERS_CREATED_TOTAL.inc()


def record_order_deleted(mode: str, rows_deleted: int) -> None:
    if rows_deleted > 0:
        ORDERS_DELETED_TOTAL.labels(mode=mode).inc(rows_deleted)
    else:
        ORDER_DELETE_MISSES_TOTAL.labels(mode=mode).inc()


def record_repository_error(kind: str) -> None:
    REPOSITORY_ERRORS_TOTAL.labels(kind=kind).inc()
