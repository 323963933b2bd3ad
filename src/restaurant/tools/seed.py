from __future__ import annotations

import logging
import random

from restaurant.application.ports.repositories import MenuRepository
from restaurant.domain.common.ids import MenuItemId
from restaurant.domain.menu.entities import MenuItem
from restaurant.infrastructure.db.repositories.menu_repo import SqlAlchemyMenuRepository
from restaurant.infrastructure.db.session import get_engine
from restaurant.infrastructure.observability.logging_config import configure_logging

logger = logging.getLogger(__name__)

FOOD_ITEMS = (
    "Margherita Pizza",
    "Pepperoni Pizza",
    "Caesar Salad",
    "Greek Salad",
    "Tomato Soup",
    "Miso Soup",
    "French Onion Soup",
    "Cheeseburger",
    "Veggie Burger",
    "Club Sandwich",
    "BLT Sandwich",
    "Grilled Cheese",
    "Fish and Chips",
    "Chicken Wings",
    "Buffalo Cauliflower",
    "Spaghetti Carbonara",
    "Spaghetti Bolognese",
    "Fettuccine Alfredo",
    "Penne Arrabbiata",
    "Lasagna",
    "Mushroom Risotto",
    "Chicken Tikka Masala",
    "Lamb Curry",
    "Pad Thai",
    "Green Curry",
    "Beef Pho",
    "Ramen",
    "Chicken Teriyaki",
    "Salmon Sushi Roll",
    "California Roll",
    "Beef Tacos",
    "Chicken Quesadilla",
    "Nachos",
    "Burrito Bowl",
    "Falafel Wrap",
    "Hummus Plate",
    "Grilled Salmon",
    "Ribeye Steak",
    "Roast Chicken",
    "Pork Ribs",
    "Shrimp Scampi",
    "Clam Chowder",
    "French Fries",
    "Onion Rings",
    "Garlic Bread",
    "Mozzarella Sticks",
    "Chocolate Cake",
    "Cheesecake",
    "Apple Pie",
    "Tiramisu",
)

MIN_COOKING_TIME = 5
MAX_COOKING_TIME = 14


def build_menu_items(rng: random.Random | None = None) -> list[MenuItem]:
    rng = rng or random.Random()
    return [
        MenuItem(
            item_id=MenuItemId(index),
            item_name=name,
            cooking_time=rng.randint(MIN_COOKING_TIME, MAX_COOKING_TIME),
        )
        for index, name in enumerate(FOOD_ITEMS)
    ]


def seed_menu(repository: MenuRepository, rng: random.Random | None = None) -> bool:
    """Make sure the catalog holds the standard food items.

    A partial catalog is wiped, together with the orders that reference it,
    and written again. Returns True when items were written.
    """
    if repository.count_items() >= len(FOOD_ITEMS):
        logger.info("menu_items_already_seeded")
        return False

    repository.replace_items(build_menu_items(rng))
    logger.info("menu_items_seeded")
    return True


def main() -> None:
    configure_logging()
    seed_menu(SqlAlchemyMenuRepository(get_engine(timeout_seconds=2.0)))


if __name__ == "__main__":
    main()
