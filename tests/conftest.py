"""Configure py.test default values and functionality."""

import os
import sys
import pytest

from tests.utils import FakeClock


# Prefer modules from source directory rather than from site-python
PROJECT_ROOT_PATH = os.path.abspath(
    os.path.join(os.path.dirname(__file__), '..')
)
sys.path.insert(0, PROJECT_ROOT_PATH)


@pytest.fixture(scope="function")
def clock(mocker):
    """Replace the clock and sleep used by assert_eventually.

    :param mocker: pytest-mock mocker
    :returns: FakeClock instance
    """
    fake_clock = FakeClock()
    mocker.patch("assert_eventually.eventually.time", new=fake_clock)
    return fake_clock
