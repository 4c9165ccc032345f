"""
Stage results.

Pipeline stages that may degrade return a ``StageResult`` instead of raising,
and the caller decides which placeholder stands in for a failure.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of one stage: a value on success, an error message otherwise."""
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: T) -> "StageResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> "StageResult[T]":
        return cls(success=False, error=error)

    def value_or(self, default: T) -> T:
        return self.data if self.success else default
