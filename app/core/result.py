"""
Result type and the fallback policy.

Read paths that can degrade (AI ranking, store queries) return a Result
instead of raising, and the decision to substitute a fallback lives in
one place: with_fallback().

Usage:
    listings = with_fallback(store.fetch_active, placeholder_internships)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from app.core.errors import FetchError
from app.core.log import get_logger

log = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[FetchError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def err(cls, error: FetchError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None


def with_fallback(
    primary: Callable[[], Result[T]],
    fallback: Callable[[], T],
    label: str = "",
) -> T:
    """Return primary()'s value, or fallback() if it produced an error."""
    result = primary()
    if result.is_ok:
        return result.value  # type: ignore[return-value]

    log.warning(
        "%s failed (%s: %s), using fallback",
        label or getattr(primary, "__qualname__", "primary"),
        type(result.error).__name__,
        result.error,
    )
    return fallback()
