import pytest
from loguru import logger

from cycletime.converter import CycleConverter
from tests.helpers import CLOCK_19M2, CLOCK_1G


@pytest.fixture
def conv_19m2() -> CycleConverter:
    return CycleConverter(CLOCK_19M2)


@pytest.fixture
def conv_1g() -> CycleConverter:
    return CycleConverter(CLOCK_1G)


@pytest.fixture
def conv_default() -> CycleConverter:
    return CycleConverter()


@pytest.fixture
def log_records():
    """Collect loguru records emitted during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
