"""Book service: validation then single-row persistence."""

from typing import Any

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from bookstore.core.results import NotFound, Ok, Result, StorageFailed, ValidationFailed
from bookstore.core.validation import parse_book_payload, validate_book
from bookstore.entities.book import Book, BookRepository


class BookService:
    """The five book operations.

    Every method returns a Result variant instead of raising for expected
    conditions. Storage failures are rolled back and returned as StorageFailed.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._repository = BookRepository(session)

    def list_books(self) -> Result[list[Book]]:
        try:
            return Ok(self._repository.list_all())
        except SQLAlchemyError as exc:
            return self._storage_failed("list", exc)

    def get_book(self, isbn: str) -> Result[Book]:
        try:
            book = self._repository.get(isbn)
        except SQLAlchemyError as exc:
            return self._storage_failed("get", exc)

        if book is None:
            return NotFound(isbn)
        return Ok(book)

    def create_book(self, payload: Any) -> Result[Book]:
        violations = validate_book(payload, require_key=True)
        if violations:
            logger.info("Rejected book payload with {} violation(s)", len(violations))
            return ValidationFailed(violations)

        book = Book(**parse_book_payload(payload).model_dump())
        try:
            created = self._repository.create(book)
            self._session.commit()
        except SQLAlchemyError as exc:
            return self._storage_failed("create", exc)

        logger.info("Created book {}", created.isbn)
        return Ok(created, status=201)

    def update_book(self, isbn: str, payload: Any) -> Result[Book]:
        violations = validate_book(payload)
        if violations:
            logger.info("Rejected book payload with {} violation(s)", len(violations))
            return ValidationFailed(violations)

        # the path isbn selects the row; an isbn in the body is ignored
        book = Book(**{**parse_book_payload(payload).model_dump(), "isbn": isbn})
        try:
            updated = self._repository.update(isbn, book)
            if updated is None:
                return NotFound(isbn)
            self._session.commit()
        except SQLAlchemyError as exc:
            return self._storage_failed("update", exc)

        logger.info("Updated book {}", isbn)
        return Ok(updated)

    def delete_book(self, isbn: str) -> Result[str]:
        try:
            deleted = self._repository.delete(isbn)
            if not deleted:
                return NotFound(isbn)
            self._session.commit()
        except SQLAlchemyError as exc:
            return self._storage_failed("delete", exc)

        logger.info("Deleted book {}", isbn)
        return Ok(isbn)

    def _storage_failed(self, operation: str, exc: SQLAlchemyError) -> StorageFailed:
        self._session.rollback()
        logger.bind(
            operation=operation,
            error_type=type(exc).__name__,
        ).opt(exception=exc).error("Book storage operation failed")
        return StorageFailed(exc)
