"""Database initialization script."""

from src.bookstore.core.services.database.db_session import DbSessionService
from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import get_config


def init_db(config: ConfigData | None = None) -> DbSessionService:
    """Create the id counter and book tables for the configured database."""
    db_service = DbSessionService((config or get_config()).database)
    db_service.create_all()
    return db_service


if __name__ == "__main__":
    init_db().dispose()
