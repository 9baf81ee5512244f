"""Book API router with CRUD operations."""

from typing import Any, Callable

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse

from bookstore.api.http.deps import get_book_service
from bookstore.api.http.errors import error_response
from bookstore.core.results import NotFound, Ok, Result, StorageFailed, ValidationFailed
from bookstore.core.services import BookService

router = APIRouter(prefix="/books", tags=["books"])


def render_result(result: Result[Any], envelope: Callable[[Any], dict[str, Any]]) -> JSONResponse:
    """Pick the status code and JSON body for a service result."""
    if isinstance(result, Ok):
        return JSONResponse(status_code=result.status, content=envelope(result.value))
    if isinstance(result, ValidationFailed):
        return error_response(result.violations, 400)
    if isinstance(result, NotFound):
        return error_response(result.message, 404)
    if isinstance(result, StorageFailed):
        return error_response(result.message, 500)
    raise TypeError(f"Unexpected service result: {result!r}")


def _book(book) -> dict[str, Any]:
    return {"book": book.model_dump()}


@router.get("")
def list_books(service: BookService = Depends(get_book_service)) -> JSONResponse:
    """List all books."""
    return render_result(
        service.list_books(),
        lambda books: {"books": [book.model_dump() for book in books]},
    )


@router.get("/{isbn}")
def get_book(isbn: str, service: BookService = Depends(get_book_service)) -> JSONResponse:
    """Get a book by ISBN."""
    return render_result(service.get_book(isbn), _book)


@router.post("")
def create_book(
    payload: Any = Body(default=None),
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """Create a new book."""
    return render_result(service.create_book(payload), _book)


@router.put("/{isbn}")
def update_book(
    isbn: str,
    payload: Any = Body(default=None),
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """Replace every field of an existing book."""
    return render_result(service.update_book(isbn, payload), _book)


@router.delete("/{isbn}")
def delete_book(isbn: str, service: BookService = Depends(get_book_service)) -> JSONResponse:
    """Delete a book."""
    return render_result(service.delete_book(isbn), lambda _: {"message": "Book deleted"})
