from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from restaurant.infrastructure.db import session as db_session
from restaurant.infrastructure.db.models.menu import Base, MenuItemModel
from restaurant.infrastructure.db.models.order import OrderModel  # noqa: F401
from restaurant.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository

ROOT_DIR = Path(__file__).resolve().parents[2]


@pytest.fixture(scope="session", autouse=True)
def integration_environment(tmp_path_factory: pytest.TempPathFactory) -> Iterator[str]:
    database_path = tmp_path_factory.mktemp("db") / "restaurant.sqlite3"
    database_url = f"sqlite:///{database_path}"

    os.environ["DATABASE_URL"] = database_url
    os.environ.setdefault("OTEL_SERVICE_NAME", "restaurant-orders-test")
    os.environ.setdefault("OTEL_EXPORTER_OTLP_ENDPOINT", "")

    db_session._build_engine.cache_clear()

    env = os.environ.copy()
    env["PYTHONPATH"] = f"{ROOT_DIR / 'src'}{os.pathsep}{env.get('PYTHONPATH', '')}".rstrip(
        os.pathsep
    )

    subprocess.run(
        [sys.executable, "-m", "alembic", "-c", "alembic.ini", "upgrade", "head"],
        cwd=ROOT_DIR,
        env=env,
        check=True,
    )
    subprocess.run(
        [sys.executable, "-m", "restaurant.tools.seed"],
        cwd=ROOT_DIR,
        env=env,
        check=True,
    )
    yield database_url
    db_session._build_engine.cache_clear()


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Private database holding only Soup (id 1) and Salad (id 2)."""
    engine = db_session.build_engine(f"sqlite:///{tmp_path / 'orders.sqlite3'}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                MenuItemModel(id=1, item_name="Soup", cooking_time=10),
                MenuItemModel(id=2, item_name="Salad", cooking_time=5),
            ]
        )
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(engine)
