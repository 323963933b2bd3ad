from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, HTTPException

from restaurant.application.dto.requests import CreateOrderRequest
from restaurant.application.dto.responses import DeleteOrderResponse
from restaurant.application.ports.repositories import OrderRepository
from restaurant.application.use_cases.orders import create_order, delete_order
from restaurant.domain.common.ids import MenuItemId, OrderId, TableNumber
from restaurant.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository

router = APIRouter()


def _order_repository() -> OrderRepository:
    return SqlAlchemyOrderRepository()


@router.post("/v1/orders", response_model=UUID)
def post_order(request_dto: CreateOrderRequest) -> UUID:
    return create_order(
        _order_repository(),
        table_number=TableNumber(request_dto.table_number),
        menu_item_id=MenuItemId(request_dto.menu_item_id),
    )


@router.delete("/v1/orders/{order_id}", response_model=DeleteOrderResponse)
def remove_order(order_id: UUID) -> DeleteOrderResponse:
    rows_deleted = delete_order(_order_repository(), order_id=OrderId(order_id))
    if rows_deleted == 0:
        raise HTTPException(status_code=404, detail=f"order {order_id} not found")
    return DeleteOrderResponse(deleted=rows_deleted, message="Order deleted.")
