from __future__ import annotations

from dataclasses import dataclass

from restaurant.domain.common.ids import MenuItemId


@dataclass(frozen=True)
class MenuItem:
    item_id: MenuItemId
    item_name: str
    cooking_time: int

    def __post_init__(self) -> None:
        if not self.item_name.strip():
            raise ValueError("item_name must be non-empty")
        if self.cooking_time < 0:
            raise ValueError("cooking_time must be >= 0")
