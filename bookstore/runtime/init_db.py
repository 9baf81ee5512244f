"""Database initialization script."""

from bookstore.core.services.database.db_session import DbSessionService
from bookstore.runtime.context import get_config


def init_db() -> None:
    """Create all database tables."""
    db_manage_service = DbSessionService(get_config().database)
    try:
        db_manage_service.create_all()
    finally:
        db_manage_service.dispose()


if __name__ == "__main__":
    init_db()
