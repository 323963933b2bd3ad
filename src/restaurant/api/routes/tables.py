from __future__ import annotations

from fastapi import APIRouter, HTTPException

from restaurant.application.dto.responses import CompleteOrderResponse, DeleteOrderResponse
from restaurant.application.mappers.order_mapper import to_complete_order_response
from restaurant.application.ports.repositories import OrderRepository
from restaurant.application.use_cases.orders import (
    delete_order_item_from_table,
    read_order_item_from_table,
    read_orders_by_table,
)
from restaurant.domain.common.ids import MenuItemId, TableNumber
from restaurant.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository

router = APIRouter()


def _order_repository() -> OrderRepository:
    return SqlAlchemyOrderRepository()


@router.get(
    "/v1/tables/{table_number}/orders",
    response_model=list[CompleteOrderResponse],
)
def get_table_orders(table_number: int) -> list[CompleteOrderResponse]:
    orders = read_orders_by_table(_order_repository(), table_number=TableNumber(table_number))
    if not orders:
        raise HTTPException(status_code=404, detail="No orders found")
    return [to_complete_order_response(order) for order in orders]


@router.get(
    "/v1/tables/{table_number}/menu_items/{menu_item_id}",
    response_model=CompleteOrderResponse,
)
def get_table_menu_item(table_number: int, menu_item_id: int) -> CompleteOrderResponse:
    order = read_order_item_from_table(
        _order_repository(),
        menu_item_id=MenuItemId(menu_item_id),
        table_number=TableNumber(table_number),
    )
    if order is None:
        raise HTTPException(status_code=404, detail="No order found.")
    return to_complete_order_response(order)


@router.delete(
    "/v1/tables/{table_number}/menu_items/{menu_item_id}",
    response_model=DeleteOrderResponse,
)
def delete_table_menu_item(table_number: int, menu_item_id: int) -> DeleteOrderResponse:
    rows_deleted = delete_order_item_from_table(
        _order_repository(),
        menu_item_id=MenuItemId(menu_item_id),
        table_number=TableNumber(table_number),
    )
    if rows_deleted == 0:
        raise HTTPException(status_code=404, detail="No orders found to delete.")
    return DeleteOrderResponse(deleted=rows_deleted, message="Order deleted.")
