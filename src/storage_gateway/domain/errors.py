"""Error records, the per-request error collector and typed operation results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorRecord(BaseModel, frozen=True):
    """A single recorded failure with the parameters that produced it."""

    message: str
    context: dict[str, Any] = Field(default_factory=dict)


class ErrorKind(str, Enum):
    """Classifies why an operation failed."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class OperationError(BaseModel, frozen=True):
    """Structured failure carried by an unsuccessful OperationResult."""

    kind: ErrorKind
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of a storage operation.

    A failed result always has ``value`` set to None, so "failed" can be told
    apart from a successful but empty value such as an empty list.
    """

    value: T | None = None
    error: OperationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: OperationError) -> "OperationResult[T]":
        return cls(error=error)


class ErrorCollector:
    """
    Ordered collection of error records for one request.

    A collector is created per request by the HTTP boundary and cleared when
    the request finishes, so records never leak between requests.
    """

    def __init__(self):
        self._errors: list[ErrorRecord] = []

    def add_error(self, message: str, context: dict[str, Any] | None = None) -> None:
        self._errors.append(ErrorRecord(message=message, context=context or {}))

    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_all_errors(self) -> list[ErrorRecord]:
        """Returns a snapshot; later additions or a clear do not affect it."""
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()

    def __len__(self) -> int:
        return len(self._errors)
