"""
Vectorised conversions over numpy arrays.

numpy has no 128-bit integer type, so the wide primitive is rebuilt from
32-bit limbs held in ``uint64`` lanes:

- multiply: four 32x32 partial products, each < 2**64
- divide: schoolbook long division over four 32-bit limbs; the running
  remainder is below the 32-bit divisor, so ``(rem << 32) | limb`` < 2**64

Every result is element-wise identical to the scalar functions in
``converter``; no floating point is used.
"""

import numbers
from typing import Tuple

import numpy as np
from loguru import logger

from .hardware import ClockConfig, DEFAULT_CLOCK
from .units import TimeUnit
from .wide import S64_MAX, check_divisor

_U32 = np.uint64(32)
_MASK32 = np.uint64(0xFFFF_FFFF)
_S64_MAX = np.uint64(S64_MAX)


def _as_u64_array(values, name: str, signed_limit: bool) -> np.ndarray:
    """Validate integer input and return it as a ``uint64`` array."""
    if not isinstance(values, np.ndarray):
        # a negative beside a value above int64 would widen to an object array
        items = np.asarray(values, dtype=object).ravel()
        if any(isinstance(v, numbers.Integral) and v < 0 for v in items):
            raise ValueError(f"{name} must be non-negative")
    arr = np.asarray(values)
    if arr.size == 0:
        return arr.astype(np.uint64)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"{name} must be an integer array, got dtype {arr.dtype}")
    if arr.dtype.kind == "i" and np.any(arr < 0):
        raise ValueError(f"{name} must be non-negative")
    arr = arr.astype(np.uint64)
    if signed_limit and np.any(arr > _S64_MAX):
        raise ValueError(f"{name} must fit a signed 64-bit count")
    return arr


def multiply_wide_array(a, b) -> Tuple[np.ndarray, np.ndarray]:
    """
    Element-wise exact 64x64 -> 128-bit product.

    Returns:
        ``(hi, lo)`` uint64 arrays with product == (hi << 64) | lo
    """
    a = _as_u64_array(a, "a", signed_limit=False)
    b = _as_u64_array(b, "b", signed_limit=False)
    a, b = np.broadcast_arrays(a, b)

    a_lo, a_hi = a & _MASK32, a >> _U32
    b_lo, b_hi = b & _MASK32, b >> _U32

    ll = a_lo * b_lo
    lh = a_lo * b_hi
    hl = a_hi * b_lo
    hh = a_hi * b_hi

    mid = (ll >> _U32) + (lh & _MASK32) + (hl & _MASK32)
    lo = (ll & _MASK32) | (mid << _U32)
    hi = hh + (lh >> _U32) + (hl >> _U32) + (mid >> _U32)
    return hi, lo


def _divide_limbs(hi: np.ndarray, lo: np.ndarray, divisor: int):
    """Full 128-bit quotient ``(q_hi, q_lo)`` and remainder."""
    d = np.uint64(divisor)
    limbs = (hi >> _U32, hi & _MASK32, lo >> _U32, lo & _MASK32)

    rem = np.zeros_like(lo)
    q = []
    for limb in limbs:
        cur = (rem << _U32) | limb
        q.append(cur // d)
        rem = cur % d

    q_hi = (q[0] << _U32) | q[1]
    q_lo = (q[2] << _U32) | q[3]
    return q_hi, q_lo, rem


def divide_wide_array(hi, lo, divisor: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Element-wise 128-bit / 32-bit division.

    Raises:
        OverflowError: if any quotient does not fit in 64 bits
    """
    check_divisor("divisor", divisor)
    hi = _as_u64_array(hi, "hi", signed_limit=False)
    lo = _as_u64_array(lo, "lo", signed_limit=False)
    hi, lo = np.broadcast_arrays(hi, lo)

    q_hi, q_lo, rem = _divide_limbs(hi, lo, divisor)
    if np.any(q_hi):
        raise OverflowError(f"Quotient of a 128-bit value / {divisor} does not fit in 64 bits")
    return q_lo, rem


def _muldiv_array(values: np.ndarray, factor: int, divisor: int) -> np.ndarray:
    hi, lo = multiply_wide_array(values, np.uint64(factor))
    return divide_wide_array(hi, lo, divisor)[0]


# --- time -> primary cycles ---

def _branched_to_cycles_array(values, unit: TimeUnit, config: ClockConfig) -> np.ndarray:
    counts = _as_u64_array(values, unit.symbol, signed_limit=True)
    rate = np.uint64(config.base_clock_rate)
    max_value = np.uint64(config.max_value_to_multiply)
    per_second = np.uint64(unit.per_second)

    seconds = counts // per_second
    overflow = seconds > max_value
    reduced = ~overflow & (counts > max_value)
    exact = ~overflow & ~reduced

    if np.any(overflow):
        logger.error("Integer overflow, use max value")
    if np.any(reduced):
        logger.debug("Time very big, do rounding")

    # masked lanes are zeroed so no discarded lane wraps
    exact_counts = np.where(exact, counts, np.uint64(0))
    reduced_seconds = np.where(reduced, seconds, np.uint64(0))
    result = np.where(
        overflow,
        _S64_MAX,
        np.where(reduced, rate * reduced_seconds, (rate * exact_counts) // per_second),
    )
    return result.astype(np.int64)


def ms_to_cycles_array(values, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _branched_to_cycles_array(values, TimeUnit.MS, config)


def us_to_cycles_array(values, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _branched_to_cycles_array(values, TimeUnit.US, config)


def ns_to_cycles_array(values, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    counts = _as_u64_array(values, "ns", signed_limit=True)
    hi, lo = multiply_wide_array(counts, np.uint64(config.base_clock_rate))
    q_hi, q_lo, _ = _divide_limbs(hi, lo, TimeUnit.NS.per_second)

    overflow = (q_hi != 0) | (q_lo > _S64_MAX)
    if np.any(overflow):
        logger.error("Integer overflow, use max value")
    return np.where(overflow, _S64_MAX, q_lo).astype(np.int64)


# --- time -> secondary clock ticks ---

def _to_clock_cycles_array(values, unit: TimeUnit, config: ClockConfig) -> np.ndarray:
    counts = _as_u64_array(values, unit.symbol, signed_limit=True)
    return _muldiv_array(counts, config.cntfreq, unit.per_second)


def ms_to_clock_cycles_array(values, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _to_clock_cycles_array(values, TimeUnit.MS, config)


def us_to_clock_cycles_array(values, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _to_clock_cycles_array(values, TimeUnit.US, config)


def ns_to_clock_cycles_array(values, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _to_clock_cycles_array(values, TimeUnit.NS, config)


def cpu_cycles_to_clock_cycles_array(ticks, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    ticks = _as_u64_array(ticks, "ticks", signed_limit=False)
    return _muldiv_array(ticks, config.cntfreq, config.base_clock_rate)


# --- primary cycles -> time ---

def _cycles_to_array(cycles, unit: TimeUnit, config: ClockConfig) -> np.ndarray:
    cycles = _as_u64_array(cycles, "cycles", signed_limit=True)
    counts = _muldiv_array(cycles, unit.per_second, config.base_clock_rate)
    if np.any(counts > _S64_MAX):
        raise OverflowError(f"Cycle count beyond a signed 64-bit duration in {unit.symbol}")
    return counts.astype(np.int64)


def cycles_to_ms_array(cycles, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _cycles_to_array(cycles, TimeUnit.MS, config)


def cycles_to_us_array(cycles, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _cycles_to_array(cycles, TimeUnit.US, config)


def cycles_to_ns_array(cycles, config: ClockConfig = DEFAULT_CLOCK) -> np.ndarray:
    return _cycles_to_array(cycles, TimeUnit.NS, config)
