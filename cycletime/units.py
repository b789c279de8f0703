"""
Time units and durations.

Durations are integer counts in one of three units. No floating point is
involved anywhere in a conversion.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from .wide import check_s64_count


class TimeUnit(Enum):
    """时间单位 (value = units per second)"""
    MS = 1_000
    US = 1_000_000
    NS = 1_000_000_000

    @property
    def per_second(self) -> int:
        return self.value

    @property
    def symbol(self) -> str:
        return {TimeUnit.MS: "ms", TimeUnit.US: "us", TimeUnit.NS: "ns"}[self]


@dataclass(frozen=True)
class Duration:
    """时长 (不可变): integer count of ``unit``"""
    count: int
    unit: TimeUnit

    def __post_init__(self):
        # frozen: store the normalised plain int
        object.__setattr__(self, "count", check_s64_count("count", self.count))
        if not isinstance(self.unit, TimeUnit):
            raise TypeError(f"unit must be a TimeUnit, got {self.unit!r}")

    def to(self, unit: TimeUnit) -> "Duration":
        """
        Re-express the duration in another unit.

        Converting to a coarser unit floors, e.g. 1500us -> 1ms.
        """
        if unit is self.unit:
            return self
        if unit.per_second >= self.unit.per_second:
            return Duration(self.count * (unit.per_second // self.unit.per_second), unit)
        return Duration(self.count // (self.unit.per_second // unit.per_second), unit)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Exact microsecond count of a ``timedelta``."""
        # timedelta's fields are integers; avoid total_seconds() which is a float
        count = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls(count, TimeUnit.US)

    def to_timedelta(self) -> timedelta:
        """Convert to ``timedelta``; nanoseconds are floored to microseconds."""
        return timedelta(microseconds=self.to(TimeUnit.US).count)

    def __str__(self) -> str:
        return f"{self.count}{self.unit.symbol}"


def ms(count: int) -> Duration:
    return Duration(count, TimeUnit.MS)


def us(count: int) -> Duration:
    return Duration(count, TimeUnit.US)


def ns(count: int) -> Duration:
    return Duration(count, TimeUnit.NS)


def as_duration(value, unit: TimeUnit | None = None) -> Duration:
    """
    Normalise ``value`` into a ``Duration``.

    Accepts a ``Duration`` (``unit`` must be omitted or match), a
    ``timedelta``, or an integer count together with its ``unit``.
    """
    if isinstance(value, Duration):
        if unit is not None and unit is not value.unit:
            raise ValueError(f"Duration {value} given with conflicting unit {unit.symbol}")
        return value
    if isinstance(value, timedelta):
        if unit is not None:
            raise ValueError("timedelta values carry their own unit")
        return Duration.from_timedelta(value)
    if unit is None:
        raise TypeError(f"An integer count needs a TimeUnit, got {value!r} without one")
    return Duration(value, unit)
