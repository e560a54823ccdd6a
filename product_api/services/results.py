"""
Service Results

Value-or-error return type shared by the service layer. Services never
raise for expected outcomes; the API layer maps ``ErrorKind`` to a status
code.
"""

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    """Failure categories surfaced by services."""
    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL = "INTERNAL"


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a service call: either a value or an error kind with a message."""
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(error=error, message=message)
