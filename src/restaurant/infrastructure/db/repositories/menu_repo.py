from __future__ import annotations

from sqlalchemy import Engine, delete, func, select
from sqlalchemy.orm import Session

from restaurant.application.ports.repositories import MenuRepository
from restaurant.domain.common.ids import MenuItemId
from restaurant.domain.menu.entities import MenuItem
from restaurant.infrastructure.db.models.menu import MenuItemModel
from restaurant.infrastructure.db.models.order import OrderModel
from restaurant.infrastructure.db.repositories.order_repo import translate_storage_errors
from restaurant.infrastructure.db.session import get_engine


class SqlAlchemyMenuRepository(MenuRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def list_items(self) -> list[MenuItem]:
        statement = select(MenuItemModel).order_by(MenuItemModel.id)
        with translate_storage_errors("list menu items"), Session(self._engine) as session:
            models = list(session.execute(statement).scalars().all())

        return [
            MenuItem(
                item_id=MenuItemId(model.id),
                item_name=model.item_name,
                cooking_time=model.cooking_time,
            )
            for model in models
        ]

    def count_items(self) -> int:
        statement = select(func.count()).select_from(MenuItemModel)
        with translate_storage_errors("count menu items"), Session(self._engine) as session:
            return session.execute(statement).scalar_one()

    def replace_items(self, items: list[MenuItem]) -> None:
        # Orders reference menu items, so they go first.
        with translate_storage_errors("replace menu items"), Session(self._engine) as session:
            session.execute(delete(OrderModel))
            session.execute(delete(MenuItemModel))
            session.add_all(
                MenuItemModel(
                    id=item.item_id,
                    item_name=item.item_name,
                    cooking_time=item.cooking_time,
                )
                for item in items
            )
            session.commit()
