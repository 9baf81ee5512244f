"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from bookstore.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    """Owns the engine for one application instance.

    Created on startup and disposed on shutdown; nothing here is module-global.
    """

    def __init__(self, db_config: DatabaseConfig):
        logger.info("Setting up database engine and session factory")
        self._config = db_config
        self._engine = create_engine(
            db_config.connection_string, **self._get_engine_kwargs(db_config)
        )

    def _get_engine_kwargs(self, db_config: DatabaseConfig) -> dict[str, Any]:
        """Pool and connection options for the configured backend."""
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config),
        }

        if db_config.is_memory:
            # a single shared connection, or every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs["pool_pre_ping"] = True
        if not db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                }
            )
        return engine_kwargs

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict[str, Any]:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if db_config.is_sqlite:
            connect_args["check_same_thread"] = False
            if not db_config.is_memory:
                connect_args["timeout"] = 20

            if db_config.environment_mode == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        elif "postgresql" in db_config.url:
            connect_args.update(
                {
                    "application_name": "bookstore_api",
                    "connect_timeout": 30,
                }
            )

        return connect_args

    @property
    def engine(self):
        return self._engine

    def create_all(self) -> None:
        """Create all database tables."""
        from bookstore.entities.book import BookTable  # noqa: F401

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
        """Context manager style helper for scripts and tests."""
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
        """Close every pooled connection."""
        self._engine.dispose()
        logger.info("Database engine disposed")
