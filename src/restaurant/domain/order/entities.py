from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from restaurant.domain.common.ids import MenuItemId, OrderId, TableNumber


@dataclass(frozen=True)
class Order:
    """One menu item requested by one table.

    ``created_at`` is the only ordering key used to decide which order is the
    latest for a (table, menu item) pair.
    """

    order_id: OrderId
    table_number: TableNumber
    menu_item_id: MenuItemId
    created_at: datetime

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")
        object.__setattr__(self, "created_at", self.created_at.astimezone(timezone.utc))


@dataclass(frozen=True)
class CompleteOrder:
    order_id: OrderId
    table_number: TableNumber
    menu_item_id: MenuItemId
    created_at: datetime
    item_name: str
    cooking_time: int


def new_order(
    table_number: TableNumber,
    menu_item_id: MenuItemId,
    now: datetime | None = None,
) -> Order:
    # menu_item_id is checked by the storage foreign key, not here.
    return Order(
        order_id=OrderId(uuid4()),
        table_number=table_number,
        menu_item_id=menu_item_id,
        created_at=now or datetime.now(timezone.utc),
    )
