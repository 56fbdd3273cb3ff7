"""Success-or-error value returned by catalog operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from .storage import StoreError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a store operation.

    Exactly one of ``value`` and ``error`` is meaningful: ``ok`` is true when
    no error was recorded. ``value`` may legitimately be ``None`` or empty on
    success, so callers should branch on ``ok`` rather than on the value.
    """

    value: Optional[T] = None
    error: Optional[StoreError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def to_dict(self) -> Dict[str, Any] | Any:
        if self.error is not None:
            return self.error.to_dict()
        return self.value
