from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class MenuItemModel(Base):
    __tablename__ = "menu_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    cooking_time: Mapped[int] = mapped_column(Integer, nullable=False)
