from __future__ import annotations

from pydantic import BaseModel


class CreateOrderRequest(BaseModel):
    table_number: int
    menu_item_id: int
