from __future__ import annotations

import logging
import os
from pathlib import Path

import uvicorn
from alembic import command
from alembic.config import Config

from restaurant.infrastructure.db.repositories.menu_repo import SqlAlchemyMenuRepository
from restaurant.infrastructure.db.session import database_url
from restaurant.infrastructure.observability.logging_config import configure_logging
from restaurant.tools.seed import seed_menu

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "infrastructure" / "db" / "migrations"


def parse_socket_address(value: str) -> tuple[str, int]:
    """Split ``host:port`` (or ``[v6-host]:port``) into its parts."""
    host, separator, port = value.rpartition(":")
    if not separator or not host or not port.isdigit():
        raise ValueError(f"invalid socket address: {value!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f"invalid port in socket address: {value!r}")
    return host, port_number


def _socket_address() -> tuple[str, int]:
    raw_value = os.getenv("SOCKETADDRS")
    if not raw_value:
        raise RuntimeError("SOCKETADDRS is not set")
    return parse_socket_address(raw_value)


def run_migrations() -> None:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    command.upgrade(config, "head")


def main() -> None:
    configure_logging()
    # Both settings must be present before anything connects.
    database_url()
    host, port = _socket_address()

    run_migrations()
    logger.info("migrations_applied")
    seed_menu(SqlAlchemyMenuRepository())

    logger.info("server_starting", extra={"address": f"{host}:{port}"})
    uvicorn.run("restaurant.api.main:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
