"""Assert that a condition holds eventually, within some timeout.

Useful when testing multi-threaded or asynchronous code, where the state
under test settles some time after the action that changes it::

    assert_eventually(lambda: queue.qsize(), 4)

"""
import datetime
import logging
import time

from assert_eventually import default_config
from assert_eventually.exceptions import EventualAssertionError
from assert_eventually.matchers import (as_matcher, describe,
                                        describe_mismatch)


LOGGER = logging.getLogger(__name__)


def _seconds(timeout):
    if isinstance(timeout, datetime.timedelta):
        return timeout.total_seconds()
    return float(timeout)


def assert_eventually(operation, expected=None, message="", timeout=None):
    """Poll `operation` until its result matches `expected`.

    The pause between polls starts at one millisecond and doubles after
    every failed poll, up to one second. Once `timeout` has passed the
    operation is evaluated one more time, and that evaluation decides the
    outcome.

    Exceptions raised by `operation`, by the matcher or while sleeping
    (e.g. KeyboardInterrupt) propagate to the caller.

    :param operation: Function without arguments, called repeatedly
    :param expected: Matcher, predicate function or expected value. None
                     waits for a truthy value.
    :param message: Message included in the failure
    :param timeout: Seconds or datetime.timedelta, default 30 seconds
    :returns: The value that matched
    :raises EventualAssertionError: if the final evaluation does not match
    """
    matcher = as_matcher(expected)
    if timeout is None:
        timeout = default_config.DEFAULT_TIMEOUT

    timeout = _seconds(timeout)
    deadline = time.monotonic() + timeout
    interval = default_config.INITIAL_INTERVAL
    attempt = 0

    while time.monotonic() < deadline:
        actual = operation()
        if matcher.matches(actual):
            return actual

        attempt += 1
        LOGGER.debug("Attempt %d: %r did not match, retrying in %.3f s",
                     attempt, actual, interval)
        time.sleep(interval)
        interval = min(interval * 2, default_config.MAX_INTERVAL)

    LOGGER.debug("Timeout of %s s reached after %d attempts", timeout,
                 attempt)

    actual = operation()
    if matcher.matches(actual):
        return actual

    raise EventualAssertionError(message, describe(matcher), actual,
                                 describe_mismatch(matcher, actual))
