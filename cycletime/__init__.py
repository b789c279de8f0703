"""
CycleTime: deterministic time <-> cycle conversion for system emulation

Converts wall-clock durations (ms/us/ns) to and from the cycle count of a
primary CPU clock, and to the ticks of a secondary hardware counter running
at its own frequency. All arithmetic is integer-only with an exact 128-bit
intermediate, so scheduling decisions reproduce bit-for-bit on any host.

Core concepts:
- ClockConfig: immutable pair of clock rates
- CycleConverter: pure conversion functions bound to one ClockConfig
- Wide primitive: exact 64x64 -> 128-bit multiply, 128/32-bit divide
"""

# Wide arithmetic
from .wide import multiply_wide, divide_wide, S64_MAX, U64_MAX

# Configuration and units
from .hardware import ClockConfig, BASE_CLOCK_RATE, CNTFREQ, DEFAULT_CLOCK
from .units import TimeUnit, Duration

# Converter
from .converter import CycleConverter

# Default-clock function API
from .time_utils import (
    ms_to_cycles,
    us_to_cycles,
    ns_to_cycles,
    ms_to_clock_cycles,
    us_to_clock_cycles,
    ns_to_clock_cycles,
    cpu_cycles_to_clock_cycles,
    cycles_to_ms,
    cycles_to_us,
    cycles_to_ns,
    time_to_cycles,
    time_to_clock_cycles,
    cycles_to_time,
)

__version__ = "0.1.0"

__all__ = [
    # Wide arithmetic
    'multiply_wide',
    'divide_wide',
    'S64_MAX',
    'U64_MAX',

    # Configuration and units
    'ClockConfig',
    'BASE_CLOCK_RATE',
    'CNTFREQ',
    'DEFAULT_CLOCK',
    'TimeUnit',
    'Duration',

    # Converter
    'CycleConverter',

    # Default-clock function API
    'ms_to_cycles',
    'us_to_cycles',
    'ns_to_cycles',
    'ms_to_clock_cycles',
    'us_to_clock_cycles',
    'ns_to_clock_cycles',
    'cpu_cycles_to_clock_cycles',
    'cycles_to_ms',
    'cycles_to_us',
    'cycles_to_ns',
    'time_to_cycles',
    'time_to_clock_cycles',
    'cycles_to_time',
]
