from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import restaurant.api.routes.menu as menu_route
import restaurant.api.routes.orders as orders_route
import restaurant.api.routes.tables as tables_route
from restaurant.api.main import app
from restaurant.application.ports.repositories import (
    ConstraintViolationError,
    RepositoryError,
)
from restaurant.domain.common.ids import MenuItemId, OrderId, TableNumber
from restaurant.domain.menu.entities import MenuItem
from restaurant.domain.order.entities import CompleteOrder, Order


class FakeOrderRepository:
    """In-memory order storage joined against a fixed catalog."""

    def __init__(self, menu_items: list[MenuItem] | None = None) -> None:
        catalog = menu_items or [
            MenuItem(item_id=MenuItemId(1), item_name="Soup", cooking_time=10),
            MenuItem(item_id=MenuItemId(2), item_name="Salad", cooking_time=5),
        ]
        self._menu = {item.item_id: item for item in catalog}
        self._orders: dict[OrderId, Order] = {}
        self.failure: RepositoryError | None = None

    def _raise_failure(self) -> None:
        if self.failure is not None:
            raise self.failure

    def _complete(self, order: Order) -> CompleteOrder:
        item = self._menu[order.menu_item_id]
        return CompleteOrder(
            order_id=order.order_id,
            table_number=order.table_number,
            menu_item_id=order.menu_item_id,
            created_at=order.created_at,
            item_name=item.item_name,
            cooking_time=item.cooking_time,
        )

    def _latest(self, menu_item_id: MenuItemId, table_number: TableNumber) -> Order | None:
        matches = [
            order
            for order in self._orders.values()
            if order.menu_item_id == menu_item_id and order.table_number == table_number
        ]
        if not matches:
            return None
        return max(matches, key=lambda order: (order.created_at, order.order_id))

    @property
    def orders(self) -> list[Order]:
        return list(self._orders.values())

    def create(self, order: Order) -> OrderId:
        self._raise_failure()
        if order.menu_item_id not in self._menu:
            raise ConstraintViolationError(f"menu item {order.menu_item_id} does not exist")
        self._orders[order.order_id] = order
        return order.order_id

    def read_orders_by_table(self, table_number: TableNumber) -> list[CompleteOrder]:
        self._raise_failure()
        orders = sorted(
            (order for order in self._orders.values() if order.table_number == table_number),
            key=lambda order: (order.created_at, order.order_id),
        )
        return [self._complete(order) for order in orders]

    def read_order_item_from_table(
        self,
        menu_item_id: MenuItemId,
        table_number: TableNumber,
    ) -> CompleteOrder | None:
        self._raise_failure()
        latest = self._latest(menu_item_id, table_number)
        return self._complete(latest) if latest is not None else None

    def update_order(self) -> None:
        return None

    def delete_order_item_from_table(
        self,
        menu_item_id: MenuItemId,
        table_number: TableNumber,
    ) -> int:
        self._raise_failure()
        latest = self._latest(menu_item_id, table_number)
        if latest is None:
            return 0
        del self._orders[latest.order_id]
        return 1

    def delete_order(self, order_id: OrderId) -> int:
        self._raise_failure()
        return 1 if self._orders.pop(order_id, None) is not None else 0


class FakeMenuRepository:
    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self.items = list(items or [])
        self.replace_calls = 0

    def list_items(self) -> list[MenuItem]:
        return sorted(self.items, key=lambda item: item.item_id)

    def count_items(self) -> int:
        return len(self.items)

    def replace_items(self, items: list[MenuItem]) -> None:
        self.replace_calls += 1
        self.items = list(items)


@pytest.fixture
def order_repository() -> FakeOrderRepository:
    return FakeOrderRepository()


@pytest.fixture
def menu_repository() -> FakeMenuRepository:
    return FakeMenuRepository(
        [
            MenuItem(item_id=MenuItemId(1), item_name="Soup", cooking_time=10),
            MenuItem(item_id=MenuItemId(2), item_name="Salad", cooking_time=5),
        ]
    )


@pytest.fixture
def api_client(
    monkeypatch: pytest.MonkeyPatch,
    order_repository: FakeOrderRepository,
    menu_repository: FakeMenuRepository,
) -> Iterator[TestClient]:
    monkeypatch.setattr(orders_route, "_order_repository", lambda: order_repository)
    monkeypatch.setattr(tables_route, "_order_repository", lambda: order_repository)
    monkeypatch.setattr(menu_route, "_menu_repository", lambda: menu_repository)
    yield TestClient(app)
