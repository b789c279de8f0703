"""
Clock-rate configuration.

Two independent counters are modelled:
- the primary (CPU) cycle counter running at ``BASE_CLOCK_RATE``
- the secondary hardware tick counter running at ``CNTFREQ``
"""

from dataclasses import dataclass

from .wide import S64_MAX, U32_MAX

# Hardware constants
BASE_CLOCK_RATE = 1_019_215_872  # ~1.02 GHz CPU clock
CNTFREQ = 19_200_000             # 19.2 MHz system counter


@dataclass(frozen=True)
class ClockConfig:
    """
    Immutable pair of clock rates a converter is bound to.

    Both rates are in Hz. Either ordering is allowed (the secondary clock may
    be faster than the primary one). Rates are used as 32-bit divisors by the
    wide primitive, so they must be below 2**32.
    """
    base_clock_rate: int = BASE_CLOCK_RATE
    cntfreq: int = CNTFREQ

    def __post_init__(self):
        for name in ("base_clock_rate", "cntfreq"):
            rate = getattr(self, name)
            if isinstance(rate, bool) or not isinstance(rate, int):
                raise TypeError(f"{name} must be an int, got {type(rate).__name__}")
            if rate <= 0:
                raise ValueError(f"{name} must be positive, got {rate}")
            if rate > U32_MAX:
                raise ValueError(f"{name} must be below 2**32 Hz, got {rate}")

    @property
    def max_value_to_multiply(self) -> int:
        """Largest count that can be multiplied by the base rate within s64."""
        return S64_MAX // self.base_clock_rate

    def __str__(self) -> str:
        return f"ClockConfig({self.base_clock_rate / 1e6:.3f}MHz, {self.cntfreq / 1e6:.3f}MHz)"


DEFAULT_CLOCK = ClockConfig()
