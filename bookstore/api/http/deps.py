"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from bookstore.api.http.app_data import ApplicationDependencies
from bookstore.core.services import BookService, DbSessionService


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped session, closed once the response is sent."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_service(session: Session = Depends(get_db_session)) -> BookService:
    return BookService(session)
