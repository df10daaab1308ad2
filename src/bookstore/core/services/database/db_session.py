"""Database engine and session factory backing the book store."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from src.bookstore.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig):
        """Initialize the shared database engine and session factory."""
        self._config = db_config

        logger.info("Setting up database engine for {}", self._redacted_url())
        if db_config.is_in_memory:
            logger.warning(
                "In-memory SQLite database configured; records will not survive a restart"
            )

        self._engine = create_engine(db_config.url, **self._engine_kwargs())

    def _redacted_url(self) -> str:
        from sqlalchemy.engine import make_url

        return make_url(self._config.url).render_as_string(hide_password=True)

    def _engine_kwargs(self) -> dict[str, Any]:
        """Engine options for the configured backend."""
        db_config = self._config
        kwargs: dict[str, Any] = {"echo": db_config.echo}

        if db_config.is_sqlite:
            kwargs["connect_args"] = {
                "check_same_thread": False,  # sync endpoints run on a thread pool
                "timeout": db_config.sqlite_timeout,
            }
            if db_config.is_in_memory:
                # one shared connection, otherwise every session sees an empty database
                kwargs["poolclass"] = StaticPool
        else:
            kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )
        return kwargs

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    def create_all(self) -> None:
        """Create the counter and book tables if they do not exist yet."""
        # Import tables so they register with the metadata
        from src.bookstore.entities.core.id_counter import IdCounterTable  # noqa: F401
        from src.bookstore.entities.service.book import BookTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Run the enclosed block in a single transaction."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database transaction failed")
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database health check failed")
            return False

    def dispose(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
