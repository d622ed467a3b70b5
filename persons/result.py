"""
Explicit success/failure values returned by the service layer.

Operations never raise for storage problems; they hand back either ``Ok``
or ``Error`` and leave the translation to HTTP to ``persons.responses``.
"""
import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "NotFound"
    STORAGE_FAILURE = "StorageFailure"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Error:
    kind: ErrorKind
    message: str


Result = Union[Ok[T], Error]


def not_found() -> Error:
    return Error(kind=ErrorKind.NOT_FOUND, message="Not Found")


def storage_failure(exc: Exception) -> Error:
    return Error(kind=ErrorKind.STORAGE_FAILURE, message=f"Database error: {exc}")
