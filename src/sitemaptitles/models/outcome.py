"""Tagged success/failure results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from sitemaptitles.errors import TitleScraperError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or the error that prevented producing it.

    Exactly one of ``value`` and ``error`` is meaningful; check :attr:`ok` first.
    """

    value: T | None = None
    error: TitleScraperError | None = None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TitleScraperError) -> Outcome[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
