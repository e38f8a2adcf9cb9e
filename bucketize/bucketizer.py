"""Bucketizer — slots a number into the first configured bucket that contains it.

Buckets are evaluated in the order they were added; the first match wins and
its value is returned. Each bucket is min-inclusive and max-exclusive, and a
missing bound is unlimited on that side. A value that fits no bucket gives None.

    >>> b = (
    ...     Bucketizer()
    ...     .bucket(10.0, 20.0, 15.0)
    ...     .bucket(5.0, 10.0, 7.5)
    ...     .bucket(None, 4.0, 0.0)
    ... )
    >>> b.bucketize(12.34)
    15.0
    >>> b.bucketize(9999.99) is None
    True
"""
from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, Mapping, Optional, TypeVar, Union

from bucketize.config import settings
from bucketize.models import Bucket, BucketDefinition

logger = logging.getLogger(__name__)

T = TypeVar("T")

BucketLike = Union[Bucket[T], tuple[Optional[T], Optional[T], T]]


class Bucketizer(Generic[T]):
    """Ordered list of buckets plus the lookup over them.

    Order is priority: if a bucket from 0 to 100 is added before a bucket from
    2 to 50, nothing will ever land in the second one. Buckets are only ever
    appended; lookups never modify the list.

    A bucket whose lower bound is not below its upper bound can never match.
    It is accepted as-is unless strict mode is on (``strict=True`` or
    ``BUCKETIZE_STRICT``), in which case adding it raises ValueError.
    """

    def __init__(self, strict: bool | None = None) -> None:
        self._buckets: list[Bucket[T]] = []
        self.strict = settings.STRICT if strict is None else strict

    @classmethod
    def from_buckets(
        cls, buckets: Iterable[BucketLike], strict: bool | None = None
    ) -> "Bucketizer[T]":
        """Build from Bucket objects or (lower, upper, value) triples, in order."""
        bucketizer = cls(strict=strict)
        for item in buckets:
            if isinstance(item, Bucket):
                bucketizer.add(item)
            else:
                lower, upper, value = item
                bucketizer.bucket(lower, upper, value)
        return bucketizer

    @classmethod
    def from_definitions(
        cls, definitions: Iterable[Mapping[str, Any]], strict: bool | None = None
    ) -> "Bucketizer[float]":
        """Build from mappings with lower/upper/value keys.

        Every definition is validated before any bucket is added, so a bad
        entry raises pydantic.ValidationError without a half-built result.
        """
        parsed = [BucketDefinition.model_validate(d) for d in definitions]
        return cls.from_buckets((d.to_bucket() for d in parsed), strict=strict)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def bucket(self, lower: Optional[T], upper: Optional[T], value: T) -> "Bucketizer[T]":
        """Add a bucket matching lower <= x < upper and return self for chaining.

        Either bound may be None for an open end:

            >>> b = Bucketizer().bucket(10.0, None, 10.0).bucket(0.0, 10.0, 5.0)
            >>> b.bucketize(4.132), b.bucketize(12.0), b.bucketize(-10.0)
            (5.0, 10.0, None)
        """
        return self.add(Bucket(lower, upper, value))

    def add(self, bucket: Bucket[T]) -> "Bucketizer[T]":
        """Append a prebuilt Bucket and return self."""
        if bucket.is_unreachable:
            if self.strict:
                raise ValueError(
                    f"Bucket [{bucket.lower!r}, {bucket.upper!r}) can never match: "
                    f"lower bound must be below upper bound"
                )
            logger.debug("Bucket %r can never match; keeping it", bucket)
        self._buckets.append(bucket)
        logger.debug("Added bucket %r (%d total)", bucket, len(self._buckets))
        return self

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find(self, x: T) -> Bucket[T] | None:
        """Return the first bucket containing x, or None."""
        for b in self._buckets:
            if b.matches(x):
                return b
        return None

    def bucketize(self, x: T) -> T | None:
        """Return the value of the first bucket containing x, or None if none does."""
        match = self.find(x)
        if match is None:
            return None
        return match.value

    def bucketize_many(self, values: Iterable[T]) -> list[T | None]:
        return [self.bucketize(x) for x in values]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    @property
    def buckets(self) -> tuple[Bucket[T], ...]:
        return tuple(self._buckets)

    def copy(self) -> "Bucketizer[T]":
        """Independent bucketizer with the same buckets and strict flag."""
        clone = type(self)(strict=self.strict)
        clone._buckets = list(self._buckets)
        return clone

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[Bucket[T]]:
        return iter(self.buckets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bucketizer):
            return NotImplemented
        return self._buckets == other._buckets

    def __repr__(self) -> str:
        return f"Bucketizer({self._buckets!r})"
