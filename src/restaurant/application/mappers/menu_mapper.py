from __future__ import annotations

from restaurant.application.dto.responses import MenuItemResponse
from restaurant.domain.menu.entities import MenuItem


def to_menu_item_response(item: MenuItem) -> MenuItemResponse:
    return MenuItemResponse(
        id=item.item_id,
        item_name=item.item_name,
        cooking_time=item.cooking_time,
    )
