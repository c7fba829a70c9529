"""Common result type shared by the parser and the field value set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import CronFieldError

T = TypeVar("T")

# Marks "no such value"; a start/end pair of NIL means the whole domain.
NIL = -1


@dataclass
class Result(Generic[T]):
    success: bool
    value: Optional[T] = None
    error: Optional[CronFieldError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: CronFieldError) -> "Result[T]":
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if not self.success:
            raise self.error
        return self.value
