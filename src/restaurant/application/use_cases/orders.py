"""Order use cases.

Every function takes the repository it works against as its first argument, so
the same code runs over the SQLAlchemy repository in production and over an
in-memory fake in tests. Storage errors raised by the repository are not
caught here; absence of a matching order is reported as an empty list, ``None``
or a zero count.
"""

from __future__ import annotations

import logging
from datetime import datetime

from restaurant.application.metrics.order_lifecycle import (
    record_order_created,
    record_order_deleted,
)
from restaurant.application.ports.repositories import OrderRepository
from restaurant.domain.common.ids import MenuItemId, OrderId, TableNumber
from restaurant.domain.order.entities import CompleteOrder, new_order

logger = logging.getLogger(__name__)


def create_order(
    repository: OrderRepository,
    *,
    table_number: TableNumber,
    menu_item_id: MenuItemId,
    now: datetime | None = None,
) -> OrderId:
    order = new_order(table_number=table_number, menu_item_id=menu_item_id, now=now)
    order_id = repository.create(order)
    record_order_created()
    logger.info(
        "order_created",
        extra={
            "order_id": str(order_id),
            "table_number": table_number,
            "menu_item_id": menu_item_id,
        },
    )
    return order_id


def read_orders_by_table(
    repository: OrderRepository,
    *,
    table_number: TableNumber,
) -> list[CompleteOrder]:
    return repository.read_orders_by_table(table_number)


def read_order_item_from_table(
    repository: OrderRepository,
    *,
    menu_item_id: MenuItemId,
    table_number: TableNumber,
) -> CompleteOrder | None:
    return repository.read_order_item_from_table(menu_item_id, table_number)


def delete_order_item_from_table(
    repository: OrderRepository,
    *,
    menu_item_id: MenuItemId,
    table_number: TableNumber,
) -> int:
    """Remove the latest order of ``menu_item_id`` at ``table_number``.

    Returns the number of removed orders, which is 0 or 1.
    """
    rows_deleted = repository.delete_order_item_from_table(menu_item_id, table_number)
    record_order_deleted("latest_for_item", rows_deleted)
    logger.info(
        "order_item_deleted",
        extra={
            "table_number": table_number,
            "menu_item_id": menu_item_id,
            "rows_deleted": rows_deleted,
        },
    )
    return rows_deleted


def delete_order(repository: OrderRepository, *, order_id: OrderId) -> int:
    rows_deleted = repository.delete_order(order_id)
    record_order_deleted("by_id", rows_deleted)
    logger.info(
        "order_deleted",
        extra={"order_id": str(order_id), "rows_deleted": rows_deleted},
    )
    return rows_deleted
