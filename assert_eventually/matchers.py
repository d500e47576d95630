"""Predicates that can describe what they expect.

Expected conditions are PyHamcrest matchers. Plain functions are wrapped
in ``Matcher`` and any other expected value is compared for equality, the
same way PyHamcrest wraps values passed to its own matchers.
"""
import ast
import inspect
import re

from hamcrest import equal_to
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.string_description import StringDescription


__all__ = [
    "Matcher",
    "as_matcher",
    "describe",
    "describe_callable",
    "describe_mismatch",
    "equal_to",
    "is_truthy",
    "predicate",
]


class Matcher(BaseMatcher):
    """Predicate paired with a human-readable description.

    :param predicate: Function called with the observed value
    :param description: Text describing the expected condition
    """

    def __init__(self, predicate, description):
        self._predicate = predicate
        self._description = description

    def _matches(self, item):
        return bool(self._predicate(item))

    def describe_to(self, description):
        description.append_text(self._description)


def is_truthy():
    """Match any truthy value."""
    return Matcher(bool, "a truthy value")


def predicate(func, description=None):
    """Use any callable as a matcher.

    Needed for predicates that ``as_matcher`` would otherwise compare for
    equality, such as bound methods or objects with ``__call__``.

    :param func: Function called with the observed value
    :param description: Text describing the expected condition, defaults
                        to the source code of `func`
    :returns: Matcher
    """
    if description is None:
        description = describe_callable(func)
    return Matcher(func, description)


def _lambda_source(source, func):
    """Cut the lambda expression out of the source line(s) it is on."""
    code = func.__code__
    params = code.co_varnames[:code.co_argcount]
    expressions = []
    for match in re.finditer(r"\blambda\b", source):
        text = source[match.start():]
        # Longest prefix that parses as a lambda is the whole expression
        for end in range(len(text), 0, -1):
            try:
                node = ast.parse(text[:end], mode="eval").body
            except SyntaxError:
                continue
            if isinstance(node, ast.Lambda):
                args = tuple(arg.arg for arg in node.args.args)
                expressions.append((args, " ".join(text[:end].split())))
                break

    for args, expression in expressions:
        if args == params:
            return expression
    return expressions[0][1] if expressions else None


def describe_callable(func):
    """Describe a callable by its source code.

    :param func: Predicate function
    :returns: Source code of the function, or its repr if the source is
              not available
    """
    try:
        source = inspect.getsource(func).strip()
    except (OSError, TypeError):
        # Use 'repr' as fallback if we can't get a human-readable
        # Python source code for the function
        return repr(func)

    if func.__name__ == "<lambda>":
        return _lambda_source(source, func) or source
    return source


def describe(matcher):
    """Return the description of a matcher."""
    return str(StringDescription().append_description_of(matcher))


def describe_mismatch(matcher, item):
    """Return the matcher's explanation of why `item` did not match."""
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)


def as_matcher(expected):
    """Convert `expected` into a matcher.

    * ``None`` waits for a truthy value
    * PyHamcrest matchers are used as they are
    * functions and lambdas are used as predicates
    * anything else, callable objects included, is compared for equality

    :param expected: Expected condition
    :returns: Matcher
    """
    if expected is None:
        return is_truthy()
    if inspect.isfunction(expected):
        return predicate(expected)
    return wrap_matcher(expected)
