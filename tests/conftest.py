"""Shared test fixtures for the game and order services.

Both services run against one temporary SQLite database file per test,
mirroring the shared store they use in production.
"""

import os

# Module-level apps are built on import; keep them off the global Prometheus registry.
os.environ.setdefault("ENABLE_METRICS", "false")

from collections.abc import Generator

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import text

from game_service.config import Settings as GameSettings
from game_service.main import create_app as create_game_app
from order_service.config import Settings as OrderSettings
from order_service.database import Database as OrderDatabase
from order_service.main import create_app as create_order_app


@pytest.fixture
def database_url(tmp_path) -> str:
    """Return a SQLite URL for a fresh database file."""
    return f"sqlite:///{tmp_path / 'lugx_gaming.db'}"


@pytest.fixture
def game_settings(database_url: str) -> GameSettings:
    return GameSettings(DATABASE_URL=database_url, ENABLE_METRICS=False)


@pytest.fixture
def order_settings(database_url: str) -> OrderSettings:
    return OrderSettings(DATABASE_URL=database_url, ENABLE_METRICS=False)


@pytest.fixture
def game_client(game_settings: GameSettings) -> Generator[TestClient, None, None]:
    """Game service client with startup/shutdown hooks run."""
    with TestClient(create_game_app(game_settings)) as client:
        yield client


@pytest.fixture
def order_client(order_settings: OrderSettings) -> Generator[TestClient, None, None]:
    """Order service client with startup/shutdown hooks run."""
    with TestClient(create_order_app(order_settings)) as client:
        yield client


@pytest.fixture
def order_database(order_settings: OrderSettings) -> Generator[OrderDatabase, None, None]:
    """Order database handle with tables created, for repository-level tests."""
    database = OrderDatabase(order_settings)
    database.create_tables()
    yield database
    database.dispose()


def reject_items_named(database: OrderDatabase, game_name: str) -> None:
    """Install a trigger making the store refuse order items with this name."""
    with database.engine.begin() as connection:
        connection.execute(text(
            "CREATE TRIGGER reject_order_item BEFORE INSERT ON order_items "
            f"WHEN NEW.game_name = '{game_name}' "
            "BEGIN SELECT RAISE(ABORT, 'order item rejected'); END"
        ))


def count_rows(database: OrderDatabase, table: str) -> int:
    with database.engine.connect() as connection:
        return connection.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()
