"""Tagged success/failure results used by the configuration core."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Failure categories surfaced by the configuration core."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    STORE_FAULT = "STORE_FAULT"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err:
    """Failed result carrying an error kind and a readable message."""

    kind: ErrorKind
    message: str


Outcome: TypeAlias = Ok[T] | Err
