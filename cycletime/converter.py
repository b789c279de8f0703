"""
Cycle/time converter.

Converts wall-clock durations to primary (CPU) cycles and secondary (counter)
ticks, and primary cycles back to durations. Every conversion is integer-only
so results are bit-exact across hosts.

Overflow policy for time -> primary cycles:
- whole seconds too large to multiply by the base rate: saturate to S64_MAX
- raw count too large but whole seconds fine: multiply whole seconds only,
  dropping the sub-second part
- otherwise: exact floor((rate * count) / units_per_second)
"""

from loguru import logger

from .hardware import ClockConfig, DEFAULT_CLOCK
from .units import Duration, TimeUnit
from .wide import (
    S64_MAX,
    check_s64_count,
    check_u64,
    divide_wide,
    multiply_wide,
    muldiv,
)


class CycleConverter:
    """
    Stateless conversion functions bound to one ``ClockConfig``.

    Instances hold nothing but the (frozen) config and are safe to share
    between threads.
    """

    def __init__(self, config: ClockConfig = DEFAULT_CLOCK):
        if not isinstance(config, ClockConfig):
            raise TypeError(f"config must be a ClockConfig, got {type(config).__name__}")
        self._config = config

    @property
    def config(self) -> ClockConfig:
        return self._config

    # --- time -> primary cycles ---

    def _branched_to_cycles(self, count: int, unit: TimeUnit) -> int:
        count = check_s64_count(unit.symbol, count)
        rate = self._config.base_clock_rate
        max_value = self._config.max_value_to_multiply
        per_second = unit.per_second

        if count // per_second > max_value:
            logger.error("Integer overflow, use max value")
            return S64_MAX
        if count > max_value:
            logger.debug("Time very big, do rounding")
            return rate * (count // per_second)
        return (rate * count) // per_second

    def ms_to_cycles(self, ms: int) -> int:
        """Milliseconds to primary cycles (saturating at S64_MAX)."""
        return self._branched_to_cycles(ms, TimeUnit.MS)

    def us_to_cycles(self, us: int) -> int:
        """Microseconds to primary cycles (saturating at S64_MAX)."""
        return self._branched_to_cycles(us, TimeUnit.US)

    def ns_to_cycles(self, ns: int) -> int:
        """
        Nanoseconds to primary cycles, always through the wide primitive.

        A quotient above the signed 64-bit range saturates like the ms/us
        overflow branch.
        """
        ns = check_s64_count("ns", ns)
        product = multiply_wide(ns, self._config.base_clock_rate)
        if product >= (S64_MAX + 1) * TimeUnit.NS.per_second:
            logger.error("Integer overflow, use max value")
            return S64_MAX
        return divide_wide(product, TimeUnit.NS.per_second)[0]

    # --- time -> secondary clock ticks ---

    def _to_clock_cycles(self, count: int, unit: TimeUnit) -> int:
        count = check_s64_count(unit.symbol, count)
        return muldiv(count, self._config.cntfreq, unit.per_second)

    def ms_to_clock_cycles(self, ms: int) -> int:
        return self._to_clock_cycles(ms, TimeUnit.MS)

    def us_to_clock_cycles(self, us: int) -> int:
        return self._to_clock_cycles(us, TimeUnit.US)

    def ns_to_clock_cycles(self, ns: int) -> int:
        return self._to_clock_cycles(ns, TimeUnit.NS)

    # --- primary cycles -> secondary clock ticks ---

    def cpu_cycles_to_clock_cycles(self, ticks: int) -> int:
        """Resample a primary tick count onto the secondary clock (floor)."""
        ticks = check_u64("ticks", ticks)
        return muldiv(ticks, self._config.cntfreq, self._config.base_clock_rate)

    # --- primary cycles -> time ---

    def _cycles_to(self, cycles: int, unit: TimeUnit) -> int:
        cycles = check_s64_count("cycles", cycles)
        count = muldiv(cycles, unit.per_second, self._config.base_clock_rate)
        if count > S64_MAX:
            raise OverflowError(
                f"{cycles} cycles is {count}{unit.symbol}, beyond a signed 64-bit duration"
            )
        return count

    def cycles_to_ms(self, cycles: int) -> int:
        return self._cycles_to(cycles, TimeUnit.MS)

    def cycles_to_us(self, cycles: int) -> int:
        return self._cycles_to(cycles, TimeUnit.US)

    def cycles_to_ns(self, cycles: int) -> int:
        return self._cycles_to(cycles, TimeUnit.NS)

    # --- unit-generic helpers ---

    def duration_to_cycles(self, duration: Duration) -> int:
        return {
            TimeUnit.MS: self.ms_to_cycles,
            TimeUnit.US: self.us_to_cycles,
            TimeUnit.NS: self.ns_to_cycles,
        }[duration.unit](duration.count)

    def duration_to_clock_cycles(self, duration: Duration) -> int:
        return self._to_clock_cycles(duration.count, duration.unit)

    def cycles_to_duration(self, cycles: int, unit: TimeUnit) -> Duration:
        return Duration(self._cycles_to(cycles, unit), unit)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self._config}>"
