from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from restaurant.application.use_cases.menu import list_menu_items
from restaurant.domain.common.ids import MenuItemId
from restaurant.domain.menu.entities import MenuItem
from restaurant.tools.seed import (
    FOOD_ITEMS,
    MAX_COOKING_TIME,
    MIN_COOKING_TIME,
    build_menu_items,
    seed_menu,
)


def test_menu_item_requires_name_and_non_negative_cooking_time() -> None:
    with pytest.raises(ValueError):
        MenuItem(item_id=MenuItemId(1), item_name="  ", cooking_time=5)
    with pytest.raises(ValueError):
        MenuItem(item_id=MenuItemId(1), item_name="Soup", cooking_time=-1)


def test_build_menu_items_covers_catalog() -> None:
    items = build_menu_items(random.Random(7))

    assert len(FOOD_ITEMS) == 50
    assert [item.item_id for item in items] == list(range(50))
    assert [item.item_name for item in items] == list(FOOD_ITEMS)
    assert all(MIN_COOKING_TIME <= item.cooking_time <= MAX_COOKING_TIME for item in items)


def test_seed_menu_fills_empty_catalog(menu_repository) -> None:
    menu_repository.items = []

    assert seed_menu(menu_repository, random.Random(1)) is True
    assert menu_repository.count_items() == 50
    assert list_menu_items(menu_repository)[0].item_name == FOOD_ITEMS[0]


def test_seed_menu_replaces_partial_catalog(menu_repository) -> None:
    assert menu_repository.count_items() == 2

    assert seed_menu(menu_repository) is True
    assert menu_repository.replace_calls == 1
    assert menu_repository.count_items() == 50


def test_seed_menu_keeps_complete_catalog(menu_repository) -> None:
    seed_menu(menu_repository)

    assert seed_menu(menu_repository) is False
    assert menu_repository.replace_calls == 1
