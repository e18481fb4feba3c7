"""Schema management for the configured database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.ichor.core.services.database.db_session import build_engine
from src.ichor.runtime.context import get_config


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else build_engine(get_config())

    def create_all(self) -> None:
        """Create all database tables."""
        import src.ichor.entities  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info(
            "Database initialized with {} tables.", len(SQLModel.metadata.tables)
        )

    def drop_all(self) -> None:
        """Drop every table known to the metadata."""
        import src.ichor.entities  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all database tables.")
