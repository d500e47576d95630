"""Hamcrest style assertion for conditions that hold eventually."""
from assert_eventually.eventually import assert_eventually
from assert_eventually.exceptions import EventualAssertionError
from assert_eventually.matchers import (Matcher, as_matcher, equal_to,
                                        is_truthy, predicate)

__all__ = [
    "assert_eventually",
    "EventualAssertionError",
    "Matcher",
    "as_matcher",
    "equal_to",
    "is_truthy",
    "predicate",
]
