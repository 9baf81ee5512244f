"""Book entity, table and repository tests using in-memory SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from bookstore.entities.book import Book, BookRepository, BookTable


class TestBookEntity:
    """Test Book domain entity."""

    def test_book_creation(self, power_up):
        book = Book(**power_up)

        assert book.isbn == "0691161518"
        assert book.pages == 264
        assert book.model_dump() == power_up

    def test_amazon_url_optional(self, power_up):
        del power_up["amazon_url"]

        assert Book(**power_up).amazon_url is None


class TestBookRepository:
    """Test BookRepository against a real database session."""

    def test_list_empty(self, session):
        assert BookRepository(session).list_all() == []

    def test_create_and_get(self, session, power_up):
        repository = BookRepository(session)

        created = repository.create(Book(**power_up))
        session.commit()

        assert created.model_dump() == power_up
        assert repository.get(power_up["isbn"]) == created

    def test_get_missing(self, session):
        assert BookRepository(session).get("9999999999") is None

    def test_list_orders_by_title(self, session, power_up, new_book):
        repository = BookRepository(session)
        repository.create(Book(**power_up))
        repository.create(Book(**new_book))
        session.commit()

        titles = [book.title for book in repository.list_all()]

        assert titles == sorted(titles)
        assert len(titles) == 2

    def test_update_replaces_all_fields(self, session, power_up, new_book):
        repository = BookRepository(session)
        repository.create(Book(**power_up))
        session.commit()

        replacement = Book(**{**new_book, "isbn": power_up["isbn"]})
        updated = repository.update(power_up["isbn"], replacement)
        session.commit()

        assert updated == replacement
        row = session.exec(select(BookTable)).one()
        assert row.title == new_book["title"]
        assert row.isbn == power_up["isbn"]

    def test_update_missing(self, session, power_up):
        assert BookRepository(session).update("9999999999", Book(**power_up)) is None

    def test_delete(self, session, power_up):
        repository = BookRepository(session)
        repository.create(Book(**power_up))
        session.commit()

        assert repository.delete(power_up["isbn"]) is True
        session.commit()
        assert repository.get(power_up["isbn"]) is None
        assert repository.delete(power_up["isbn"]) is False

    def test_duplicate_isbn_rejected_by_storage(self, session, power_up):
        session.add(BookTable(**power_up))
        session.commit()
        session.expunge_all()

        with pytest.raises(IntegrityError):
            BookRepository(session).create(Book(**power_up))
