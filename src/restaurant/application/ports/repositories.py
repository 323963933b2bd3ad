from __future__ import annotations

from enum import Enum
from typing import Protocol

from restaurant.domain.common.ids import MenuItemId, OrderId, TableNumber
from restaurant.domain.menu.entities import MenuItem
from restaurant.domain.order.entities import CompleteOrder, Order


class OrderRepository(Protocol):
    def create(self, order: Order) -> OrderId: ...

    def read_orders_by_table(self, table_number: TableNumber) -> list[CompleteOrder]: ...

    def read_order_item_from_table(
        self,
        menu_item_id: MenuItemId,
        table_number: TableNumber,
    ) -> CompleteOrder | None: ...

    def update_order(self) -> None:
        """Updates are done by deleting an order and creating a new one."""
        ...

    def delete_order_item_from_table(
        self,
        menu_item_id: MenuItemId,
        table_number: TableNumber,
    ) -> int: ...

    def delete_order(self, order_id: OrderId) -> int: ...


class MenuRepository(Protocol):
    def list_items(self) -> list[MenuItem]: ...

    def count_items(self) -> int: ...

    def replace_items(self, items: list[MenuItem]) -> None: ...


class StorageErrorKind(str, Enum):
    CONNECTION_FAILURE = "CONNECTION_FAILURE"
    CONSTRAINT = "CONSTRAINT"


class RepositoryError(Exception):
    kind: StorageErrorKind

    def __init__(self, message: str, kind: StorageErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class ConnectionFailureError(RepositoryError):
    def __init__(self, message: str) -> None:
        super().__init__(message, StorageErrorKind.CONNECTION_FAILURE)


class ConstraintViolationError(RepositoryError):
    def __init__(self, message: str) -> None:
        super().__init__(message, StorageErrorKind.CONSTRAINT)
