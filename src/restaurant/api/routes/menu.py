from __future__ import annotations

from fastapi import APIRouter

from restaurant.application.dto.responses import MenuItemResponse
from restaurant.application.mappers.menu_mapper import to_menu_item_response
from restaurant.application.ports.repositories import MenuRepository
from restaurant.application.use_cases.menu import list_menu_items
from restaurant.infrastructure.db.repositories.menu_repo import SqlAlchemyMenuRepository

router = APIRouter()


def _menu_repository() -> MenuRepository:
    return SqlAlchemyMenuRepository()


@router.get("/v1/menu_items", response_model=list[MenuItemResponse])
def get_menu_items() -> list[MenuItemResponse]:
    return [to_menu_item_response(item) for item in list_menu_items(_menu_repository())]
