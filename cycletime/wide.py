"""
Wide (128-bit) multiply/divide primitive.

All conversions in this package go through an exact double-width product of
two unsigned 64-bit operands, divided back down by a 32-bit divisor. Python
integers are unbounded, so the "128-bit" value is a plain ``int``; the width
contracts are enforced explicitly instead of by the type system.
"""

import numbers
import operator
from typing import Tuple

# Integer width limits
U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1
S64_MAX = (1 << 63) - 1
U128_MAX = (1 << 128) - 1


def _check_int(name: str, value) -> int:
    # bool is an int subclass; a flag is never a meaningful count
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    # numpy integer scalars become plain ints so no arithmetic wraps
    return operator.index(value)


def check_u64(name: str, value: int) -> int:
    """Validate that ``value`` is an unsigned 64-bit integer and return it."""
    value = _check_int(name, value)
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be in [0, 2**64), got {value}")
    return value


def check_s64_count(name: str, value: int) -> int:
    """Validate a non-negative signed 64-bit count (duration or cycles)."""
    value = _check_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    if value > S64_MAX:
        raise ValueError(f"{name} must fit a signed 64-bit count, got {value}")
    return value


def check_divisor(name: str, value: int) -> int:
    """Validate a 32-bit divisor (zero is a ZeroDivisionError, as for ``//``)."""
    value = _check_int(name, value)
    if value == 0:
        raise ZeroDivisionError(f"{name} must be non-zero")
    if not 0 < value <= U32_MAX:
        raise ValueError(f"{name} must be in [1, 2**32), got {value}")
    return value


def multiply_wide(a: int, b: int) -> int:
    """
    Exact product of two unsigned 64-bit integers.

    Args:
        a: First operand, 0 <= a < 2**64
        b: Second operand, 0 <= b < 2**64

    Returns:
        The 128-bit product. It cannot overflow: (2**64 - 1)**2 < 2**128.

    Examples:
        multiply_wide(2**64 - 1, 2**64 - 1) -> 2**128 - 2**65 + 1
        multiply_wide(1_000, 19_200_000)   -> 19_200_000_000
    """
    a = check_u64("a", a)
    b = check_u64("b", b)
    return a * b


def divide_wide(value: int, divisor: int) -> Tuple[int, int]:
    """
    Divide a 128-bit value by a 32-bit divisor.

    Args:
        value: Unsigned 128-bit dividend
        divisor: Unsigned 32-bit divisor, 1 <= divisor < 2**32

    Returns:
        ``(quotient, remainder)`` with floor semantics.

    Raises:
        OverflowError: if the quotient does not fit in 64 bits. Callers are
            expected to keep operands in range; this is never truncated.
    """
    value = _check_int("value", value)
    if not 0 <= value <= U128_MAX:
        raise ValueError(f"value must be in [0, 2**128), got {value}")
    divisor = check_divisor("divisor", divisor)

    quotient, remainder = divmod(value, divisor)
    if quotient > U64_MAX:
        raise OverflowError(
            f"Quotient of {value} / {divisor} does not fit in 64 bits"
        )
    return quotient, remainder


def muldiv(a: int, b: int, divisor: int) -> int:
    """``floor(a * b / divisor)`` through the wide primitive; quotient only."""
    return divide_wide(multiply_wide(a, b), divisor)[0]
