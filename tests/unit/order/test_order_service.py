from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from restaurant.application.ports.repositories import (
    ConnectionFailureError,
    ConstraintViolationError,
    StorageErrorKind,
)
from restaurant.application.use_cases.orders import (
    create_order,
    delete_order,
    delete_order_item_from_table,
    read_order_item_from_table,
    read_orders_by_table,
)
from restaurant.domain.common.ids import MenuItemId, TableNumber

T0 = datetime(2026, 10, 19, 18, 0, 0, tzinfo=timezone.utc)


def _create_at(repository, table_number: int, menu_item_id: int, minutes: int):
    return create_order(
        repository,
        table_number=TableNumber(table_number),
        menu_item_id=MenuItemId(menu_item_id),
        now=T0 + timedelta(minutes=minutes),
    )


def test_create_then_read_table_joins_catalog(order_repository) -> None:
    order_id = create_order(order_repository, table_number=TableNumber(5), menu_item_id=MenuItemId(1))

    orders = read_orders_by_table(order_repository, table_number=TableNumber(5))

    assert len(orders) == 1
    assert orders[0].order_id == order_id
    assert orders[0].table_number == 5
    assert orders[0].menu_item_id == 1
    assert orders[0].item_name == "Soup"
    assert orders[0].cooking_time == 10


def test_read_table_without_orders_is_empty(order_repository) -> None:
    assert read_orders_by_table(order_repository, table_number=TableNumber(42)) == []
    assert (
        read_order_item_from_table(
            order_repository, menu_item_id=MenuItemId(1), table_number=TableNumber(42)
        )
        is None
    )


def test_latest_order_is_read_and_deleted_first(order_repository) -> None:
    ids = [_create_at(order_repository, 5, 1, minutes) for minutes in (1, 2, 3)]
    _create_at(order_repository, 5, 2, 10)
    _create_at(order_repository, 6, 1, 10)

    latest = read_order_item_from_table(
        order_repository, menu_item_id=MenuItemId(1), table_number=TableNumber(5)
    )
    assert latest is not None
    assert latest.order_id == ids[2]

    assert (
        delete_order_item_from_table(
            order_repository, menu_item_id=MenuItemId(1), table_number=TableNumber(5)
        )
        == 1
    )
    latest = read_order_item_from_table(
        order_repository, menu_item_id=MenuItemId(1), table_number=TableNumber(5)
    )
    assert latest is not None
    assert latest.order_id == ids[1]
    assert len(order_repository.orders) == 4


def test_delete_without_match_returns_zero_and_keeps_storage(order_repository) -> None:
    _create_at(order_repository, 5, 2, 1)

    rows_deleted = delete_order_item_from_table(
        order_repository, menu_item_id=MenuItemId(1), table_number=TableNumber(5)
    )

    assert rows_deleted == 0
    assert len(order_repository.orders) == 1


def test_create_with_unknown_menu_item_propagates_constraint_error(order_repository) -> None:
    with pytest.raises(ConstraintViolationError) as exc_info:
        create_order(order_repository, table_number=TableNumber(5), menu_item_id=MenuItemId(404))

    assert exc_info.value.kind is StorageErrorKind.CONSTRAINT
    assert order_repository.orders == []


def test_connection_failure_propagates_unchanged(order_repository) -> None:
    failure = ConnectionFailureError("pool exhausted")
    order_repository.failure = failure

    with pytest.raises(ConnectionFailureError) as exc_info:
        read_orders_by_table(order_repository, table_number=TableNumber(5))

    assert exc_info.value is failure
    assert exc_info.value.kind is StorageErrorKind.CONNECTION_FAILURE


def test_delete_order_by_id(order_repository) -> None:
    order_id = _create_at(order_repository, 5, 1, 1)

    assert delete_order(order_repository, order_id=order_id) == 1
    assert delete_order(order_repository, order_id=order_id) == 0


def test_soup_scenario(order_repository) -> None:
    first = _create_at(order_repository, 5, 1, 1)
    second = _create_at(order_repository, 5, 1, 2)

    def latest():
        return read_order_item_from_table(
            order_repository, menu_item_id=MenuItemId(1), table_number=TableNumber(5)
        )

    def delete_latest() -> int:
        return delete_order_item_from_table(
            order_repository, menu_item_id=MenuItemId(1), table_number=TableNumber(5)
        )

    assert latest().order_id == second
    assert delete_latest() == 1
    assert latest().order_id == first
    assert delete_latest() == 1
    assert latest() is None
    assert delete_latest() == 0
