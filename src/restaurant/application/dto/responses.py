from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class CompleteOrderResponse(BaseModel):
    order_id: UUID
    table_number: int
    menu_item_id: int
    created_at: datetime
    item_name: str
    cooking_time: int


class MenuItemResponse(BaseModel):
    id: int
    item_name: str
    cooking_time: int


class DeleteOrderResponse(BaseModel):
    deleted: int
    message: str
