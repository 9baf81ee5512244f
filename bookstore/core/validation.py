"""Book payload schema and violation messages.

Incoming JSON bodies are checked against ``BookPayload`` in strict mode and
every pydantic error is rendered as a human-readable violation message, e.g.
``instance requires property "author"``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

REQUIRED_PROPERTIES: tuple[str, ...] = (
    "author",
    "language",
    "pages",
    "publisher",
    "title",
    "year",
)

KEY_PROPERTY = "isbn"

# range of a 32-bit signed INTEGER column
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1

_TYPE_NAMES = {
    "string_type": "string",
    "int_type": "integer",
}


class BookPayload(BaseModel):
    """Shape of a Book request body."""

    model_config = ConfigDict(strict=True, extra="ignore")

    isbn: str | None = None
    amazon_url: str | None = None
    author: str
    language: str
    pages: int = Field(ge=INTEGER_MIN, le=INTEGER_MAX)
    publisher: str
    title: str
    year: int = Field(ge=INTEGER_MIN, le=INTEGER_MAX)


def required_message(name: str) -> str:
    return f'instance requires property "{name}"'


def _violation_message(error: dict[str, Any]) -> str:
    name = str(error["loc"][0]) if error["loc"] else None

    if error["type"] == "missing" and name is not None:
        return required_message(name)

    subject = f"instance.{name}" if name is not None else "instance"
    type_name = _TYPE_NAMES.get(error["type"])
    if type_name is not None:
        return f"{subject} is not of a type(s) {type_name}"
    if error["type"] == "less_than_equal":
        return f"{subject} must be less than or equal to {error['ctx']['le']}"
    if error["type"] == "greater_than_equal":
        return f"{subject} must be greater than or equal to {error['ctx']['ge']}"
    return f"{subject} {error['msg']}"


def validate_book(payload: Any, *, require_key: bool = False) -> list[str]:
    """Return every violation of the Book schema found in payload.

    An empty list means the payload is valid. When require_key is set the
    ``isbn`` property must be present too, as it is when creating a book.
    """
    # a body that was not sent as JSON arrives unparsed and counts as empty
    if payload is None or isinstance(payload, (bytes, bytearray)):
        payload = {}
    if not isinstance(payload, dict):
        return ["instance is not of a type(s) object"]

    violations: list[str] = []
    if require_key and payload.get(KEY_PROPERTY) is None:
        violations.append(required_message(KEY_PROPERTY))

    try:
        BookPayload.model_validate(payload)
    except ValidationError as exc:
        for error in exc.errors():
            message = _violation_message(error)
            if message not in violations:
                violations.append(message)

    return violations


def parse_book_payload(payload: dict[str, Any]) -> BookPayload:
    """Parse a payload already accepted by validate_book."""
    return BookPayload.model_validate(payload)
