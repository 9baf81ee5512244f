"""Book database table model."""

from sqlmodel import Field, SQLModel


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the ``books`` table.
    It's separate from the domain entity so the API shape never depends on
    ORM state.
    """

    __tablename__ = "books"

    isbn: str = Field(primary_key=True)
    amazon_url: str | None = None
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int
