from __future__ import annotations

from restaurant.application.dto.responses import CompleteOrderResponse
from restaurant.domain.order.entities import CompleteOrder


def to_complete_order_response(order: CompleteOrder) -> CompleteOrderResponse:
    return CompleteOrderResponse(
        order_id=order.order_id,
        table_number=order.table_number,
        menu_item_id=order.menu_item_id,
        created_at=order.created_at,
        item_name=order.item_name,
        cooking_time=order.cooking_time,
    )
