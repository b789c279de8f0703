"""
Time conversion utilities bound to the default hardware clocks.

Primary clock: CPU cycle counter at BASE_CLOCK_RATE (~1.02 GHz).
Secondary clock: system counter at CNTFREQ (19.2 MHz).

Durations are integer counts (ms/us/ns), never floats. Use ``CycleConverter``
directly for other clock rates.
"""

from datetime import timedelta
from typing import Union

from .converter import CycleConverter
from .hardware import DEFAULT_CLOCK
from .units import Duration, TimeUnit, as_duration

_DEFAULT = CycleConverter(DEFAULT_CLOCK)

TimeValue = Union[int, Duration, timedelta]


def ms_to_cycles(ms: int) -> int:
    """Convert milliseconds to CPU cycles.

    Examples:
        ms_to_cycles(1000) -> 1_019_215_872  # one second
    """
    return _DEFAULT.ms_to_cycles(ms)


def us_to_cycles(us: int) -> int:
    """Convert microseconds to CPU cycles."""
    return _DEFAULT.us_to_cycles(us)


def ns_to_cycles(ns: int) -> int:
    """Convert nanoseconds to CPU cycles."""
    return _DEFAULT.ns_to_cycles(ns)


def ms_to_clock_cycles(ms: int) -> int:
    return _DEFAULT.ms_to_clock_cycles(ms)


def us_to_clock_cycles(us: int) -> int:
    return _DEFAULT.us_to_clock_cycles(us)


def ns_to_clock_cycles(ns: int) -> int:
    return _DEFAULT.ns_to_clock_cycles(ns)


def cpu_cycles_to_clock_cycles(ticks: int) -> int:
    """Convert CPU cycles to system counter ticks."""
    return _DEFAULT.cpu_cycles_to_clock_cycles(ticks)


def cycles_to_ms(cycles: int) -> int:
    """Convert CPU cycles to whole milliseconds (floor)."""
    return _DEFAULT.cycles_to_ms(cycles)


def cycles_to_us(cycles: int) -> int:
    """Convert CPU cycles to whole microseconds (floor)."""
    return _DEFAULT.cycles_to_us(cycles)


def cycles_to_ns(cycles: int) -> int:
    """Convert CPU cycles to whole nanoseconds (floor)."""
    return _DEFAULT.cycles_to_ns(cycles)


def time_to_cycles(value: TimeValue, unit: TimeUnit | None = None) -> int:
    """Convert any supported time value to CPU cycles.

    Args:
        value: integer count (with ``unit``), ``Duration`` or ``timedelta``
        unit: unit of an integer count

    Examples:
        time_to_cycles(5, TimeUnit.MS)
        time_to_cycles(Duration(5, TimeUnit.MS))
        time_to_cycles(timedelta(milliseconds=5))
    """
    return _DEFAULT.duration_to_cycles(as_duration(value, unit))


def time_to_clock_cycles(value: TimeValue, unit: TimeUnit | None = None) -> int:
    """Convert any supported time value to system counter ticks."""
    return _DEFAULT.duration_to_clock_cycles(as_duration(value, unit))


def cycles_to_time(cycles: int, unit: TimeUnit = TimeUnit.NS) -> Duration:
    """Convert CPU cycles to a ``Duration`` in ``unit``."""
    return _DEFAULT.cycles_to_duration(cycles, unit)
