from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timezone

from sqlalchemy import Delete, Engine, Select, delete, select
from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from restaurant.application.ports.repositories import (
    ConnectionFailureError,
    ConstraintViolationError,
    OrderRepository,
)
from restaurant.domain.common.ids import MenuItemId, OrderId, TableNumber
from restaurant.domain.order.entities import CompleteOrder, Order
from restaurant.infrastructure.db.models.menu import MenuItemModel
from restaurant.infrastructure.db.models.order import OrderModel
from restaurant.infrastructure.db.session import get_engine


@contextmanager
def translate_storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolationError(f"{operation}: {exc.orig}") from exc
    except (PoolTimeoutError, OperationalError, InterfaceError, DisconnectionError) as exc:
        raise ConnectionFailureError(f"{operation}: {exc}") from exc


class SqlAlchemyOrderRepository(OrderRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def create(self, order: Order) -> OrderId:
        model = OrderModel(
            id=order.order_id,
            table_number=order.table_number,
            menu_item_id=order.menu_item_id,
            created_at=order.created_at,
        )
        with translate_storage_errors("create order"), Session(self._engine) as session:
            session.add(model)
            session.commit()
        return order.order_id

    def read_orders_by_table(self, table_number: TableNumber) -> list[CompleteOrder]:
        statement = (
            _complete_order_select()
            .where(OrderModel.table_number == table_number)
            .order_by(OrderModel.created_at.asc(), OrderModel.id.asc())
        )
        with translate_storage_errors("read orders by table"), Session(self._engine) as session:
            rows = session.execute(statement).all()
        return [_to_complete_order(row) for row in rows]

    def read_order_item_from_table(
        self,
        menu_item_id: MenuItemId,
        table_number: TableNumber,
    ) -> CompleteOrder | None:
        statement = (
            _complete_order_select()
            .where(
                OrderModel.menu_item_id == menu_item_id,
                OrderModel.table_number == table_number,
            )
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            .limit(1)
        )
        with translate_storage_errors("read order item"), Session(self._engine) as session:
            row = session.execute(statement).first()
        if row is None:
            return None
        return _to_complete_order(row)

    def update_order(self) -> None:
        return None

    def delete_order_item_from_table(
        self,
        menu_item_id: MenuItemId,
        table_number: TableNumber,
    ) -> int:
        statement = latest_order_delete(menu_item_id, table_number)
        with translate_storage_errors("delete order item"), Session(self._engine) as session:
            rows_deleted = session.execute(statement).rowcount
            session.commit()
        return rows_deleted

    def delete_order(self, order_id: OrderId) -> int:
        statement = (
            delete(OrderModel)
            .where(OrderModel.id == order_id)
            .execution_options(synchronize_session=False)
        )
        with translate_storage_errors("delete order"), Session(self._engine) as session:
            rows_deleted = session.execute(statement).rowcount
            session.commit()
        return rows_deleted


def _complete_order_select() -> Select:
    return select(
        OrderModel.id,
        OrderModel.table_number,
        OrderModel.menu_item_id,
        OrderModel.created_at,
        MenuItemModel.item_name,
        MenuItemModel.cooking_time,
    ).join(MenuItemModel, OrderModel.menu_item_id == MenuItemModel.id)


def _to_complete_order(row) -> CompleteOrder:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return CompleteOrder(
        order_id=OrderId(row.id),
        table_number=TableNumber(row.table_number),
        menu_item_id=MenuItemId(row.menu_item_id),
        created_at=created_at,
        item_name=row.item_name,
        cooking_time=row.cooking_time,
    )


def latest_order_delete(menu_item_id: MenuItemId, table_number: TableNumber) -> Delete:
    # Selection and deletion run as one statement. SKIP LOCKED lets a concurrent
    # delete take the next latest row; SQLite has no row locks and drops the clause.
    latest_id = (
        select(OrderModel.id)
        .where(
            OrderModel.table_number == table_number,
            OrderModel.menu_item_id == menu_item_id,
        )
        .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        .limit(1)
        .with_for_update(skip_locked=True)
        .scalar_subquery()
    )
    return (
        delete(OrderModel)
        .where(OrderModel.id == latest_id)
        .execution_options(synchronize_session=False)
    )
