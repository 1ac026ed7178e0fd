"""Schema management for the storefront database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.storefront.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        self._engine = engine or DbSessionService().engine

    def create_all(self) -> list[str]:
        """Create all missing tables and return the names of every known table."""
        import src.storefront.entities  # noqa: F401  registers all tables

        SQLModel.metadata.create_all(self._engine)
        tables = sorted(SQLModel.metadata.tables)
        logger.info("Database initialized with tables: {}", ", ".join(tables))
        return tables
