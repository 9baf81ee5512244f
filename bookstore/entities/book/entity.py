"""Entity: Book."""

from pydantic import BaseModel, Field


class Book(BaseModel):
    """A book in the catalogue, keyed by its client-assigned ISBN."""

    isbn: str = Field(description="ISBN, the primary key")
    amazon_url: str | None = Field(default=None, description="Amazon product URL")
    author: str = Field(description="Author")
    language: str = Field(description="Language the book is written in")
    pages: int = Field(description="Page count")
    publisher: str = Field(description="Publisher")
    title: str = Field(description="Title")
    year: int = Field(description="Publication year")
