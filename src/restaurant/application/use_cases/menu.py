from __future__ import annotations

from restaurant.application.ports.repositories import MenuRepository
from restaurant.domain.menu.entities import MenuItem


def list_menu_items(repository: MenuRepository) -> list[MenuItem]:
    return repository.list_items()
