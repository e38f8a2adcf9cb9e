"""Bucket value objects — the immutable bucket triple and its validated mapping form."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _is_nan(v: Any) -> bool:
    # Decimal NaNs (signaling ones included) raise on comparison instead of returning False
    if isinstance(v, Decimal):
        return v.is_nan()
    return v != v


@dataclass(frozen=True)
class Bucket(Generic[T]):
    """A half-open range [lower, upper) paired with the value it maps to.

    A bound of None is unlimited on that side. `value` is free-standing and
    need not fall inside the range.
    """
    lower: Optional[T]
    upper: Optional[T]
    value: T

    def matches(self, x: T) -> bool:
        """Return True if lower <= x < upper, skipping whichever bound is None.

        A NaN input only matches a bucket with no bounds; a NaN bound matches nothing.
        """
        if _is_nan(x):
            return self.lower is None and self.upper is None
        if self.lower is not None and (_is_nan(self.lower) or x < self.lower):
            return False
        if self.upper is not None and (_is_nan(self.upper) or not x < self.upper):
            return False
        return True

    @property
    def is_unreachable(self) -> bool:
        """True when no input can ever match (lower >= upper, or a NaN bound)."""
        for bound in (self.lower, self.upper):
            if bound is not None and _is_nan(bound):
                return True
        if self.lower is None or self.upper is None:
            return False
        return not self.lower < self.upper

    def astuple(self) -> tuple[Optional[T], Optional[T], T]:
        return (self.lower, self.upper, self.value)


class BucketDefinition(BaseModel):
    """Mapping form of a bucket, e.g. {"lower": 0, "upper": 10, "value": 5}."""
    lower: Optional[float] = None
    upper: Optional[float] = None
    value: float

    def to_bucket(self) -> Bucket[float]:
        return Bucket(self.lower, self.upper, self.value)
