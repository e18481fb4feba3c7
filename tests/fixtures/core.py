from __future__ import annotations

from collections.abc import Generator

import pytest
from loguru import logger
from sqlalchemy import StaticPool, event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.ichor.api.http.app_data import ApplicationDependencies, build_dependencies
from src.ichor.runtime.config.config_data import ConfigData
from src.ichor.runtime.context import get_config


def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def engine() -> Generator[Engine]:
    """Fresh in-memory database with every table created."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_foreign_keys)

    # Import models to register them with the metadata
    import src.ichor.entities  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def log_messages() -> Generator[list]:
    """Collect loguru records emitted during the test."""
    messages: list = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)


@pytest.fixture
def config_data() -> ConfigData:
    return get_config()


@pytest.fixture
def app_dependencies(config_data: ConfigData, engine: Engine) -> ApplicationDependencies:
    return build_dependencies(config_data, engine)
