"""Book repository for data access operations."""

from sqlmodel import Session, select

from .entity import Book
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Book]:
        statement = select(BookTable).order_by(BookTable.title)
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def get(self, isbn: str) -> Book | None:
        row = self._session.get(BookTable, isbn)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def create(self, book: Book) -> Book:
        row = BookTable.model_validate(book.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def update(self, isbn: str, book: Book) -> Book | None:
        """Replace every non-key column of the row keyed by isbn."""
        row = self._session.get(BookTable, isbn)
        if row is None:
            return None

        for field, value in book.model_dump(exclude={"isbn"}).items():
            setattr(row, field, value)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def delete(self, isbn: str) -> bool:
        row = self._session.get(BookTable, isbn)
        if row is None:
            return False

        self._session.delete(row)
        self._session.flush()
        return True
