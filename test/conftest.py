"""Common test fixtures."""

from typing import List
import pytest
from tools import DATA_STREAM, TESTS, CountingTest


@pytest.fixture
def data_stream() -> List[int]:
    """Produce the integer stream used by most tests.

    A new list is made for each test so that tests cannot affect each other.
    """
    return list(DATA_STREAM)


@pytest.fixture
def counting_even() -> CountingTest:
    """Produce an even number test that records its calls."""
    return CountingTest(TESTS["even"])
