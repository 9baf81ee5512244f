"""Outcomes returned by the book service.

Expected conditions (a missing row, an invalid payload) are values, not
exceptions; the HTTP layer picks a status code from the variant it receives.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    status: int = 200


@dataclass(frozen=True)
class NotFound:
    isbn: str

    @property
    def message(self) -> str:
        return f"There is no book with an isbn '{self.isbn}'"


@dataclass(frozen=True)
class ValidationFailed:
    violations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class StorageFailed:
    cause: Exception

    @property
    def message(self) -> str:
        return str(self.cause)


Result = Union[Ok[T], NotFound, ValidationFailed, StorageFailed]
