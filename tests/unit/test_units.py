from datetime import timedelta

import numpy as np
import pytest

from cycletime.units import Duration, TimeUnit, as_duration, ms, ns, us
from cycletime.wide import S64_MAX


def test_time_unit_scales():
    assert TimeUnit.MS.per_second == 1_000
    assert TimeUnit.US.per_second == 1_000_000
    assert TimeUnit.NS.per_second == 1_000_000_000
    assert str(ms(5)) == "5ms"


def test_duration_conversion_between_units():
    assert us(1500).to(TimeUnit.MS) == ms(1)
    assert ms(2).to(TimeUnit.NS) == ns(2_000_000)
    assert ns(999).to(TimeUnit.US) == us(0)
    d = us(42)
    assert d.to(TimeUnit.US) is d


def test_duration_to_finer_unit_can_leave_s64_range():
    with pytest.raises(ValueError):
        ms(S64_MAX).to(TimeUnit.NS)


@pytest.mark.parametrize("count, error", [(-1, ValueError), (S64_MAX + 1, ValueError), (1.0, TypeError)])
def test_invalid_duration_count(count, error):
    with pytest.raises(error):
        Duration(count, TimeUnit.MS)


def test_invalid_duration_unit():
    with pytest.raises(TypeError):
        Duration(1, "ms")


def test_timedelta_interop_is_exact():
    delta = timedelta(days=1, seconds=2, microseconds=3)
    d = Duration.from_timedelta(delta)
    assert d == us(86_402_000_003)
    assert d.to_timedelta() == delta
    assert ns(1999).to_timedelta() == timedelta(microseconds=1)


def test_negative_timedelta_is_rejected():
    with pytest.raises(ValueError):
        Duration.from_timedelta(timedelta(microseconds=-1))


def test_as_duration():
    assert as_duration(5, TimeUnit.MS) == ms(5)
    assert as_duration(ms(5)) == ms(5)
    assert as_duration(ms(5), TimeUnit.MS) == ms(5)
    assert as_duration(timedelta(milliseconds=5)) == us(5000)

    with pytest.raises(TypeError):
        as_duration(5)
    with pytest.raises(ValueError):
        as_duration(ms(5), TimeUnit.NS)
    with pytest.raises(ValueError):
        as_duration(timedelta(seconds=1), TimeUnit.MS)


def test_duration_count_is_stored_as_plain_int():
    d = Duration(np.int64(5), TimeUnit.MS)
    assert type(d.count) is int
    assert d == ms(5)
