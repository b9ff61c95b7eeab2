"""Tools for building a single test out of several.

Stacking FilteringIterators gives the same items as combining their tests with
all_of, but any_of and negate cannot be expressed by stacking. All of the
functions here forward keyword arguments to the tests they wrap, so they can be
used together with the aux_args of Filter and FilteringIterator.
"""
from typing import (
    Any,
    Callable,
)

Test = Callable[..., Any]


def all_of(*tests: Test) -> Callable[..., bool]:
    """Make a test that passes only if every given test passes.

    Tests are evaluated left to right and evaluation stops at the first failure.

    Arguments:
    ---------
    *tests:
        Callables to combine. If none are given, the result accepts everything.

    Returns:
    -------
    Function taking an item (and keyword arguments) and returning a bool.

    """

    def _all(item: Any, /, **kwargs) -> bool:
        return all(t(item, **kwargs) for t in tests)

    return _all


def any_of(*tests: Test) -> Callable[..., bool]:
    """Make a test that passes if at least one given test passes.

    Tests are evaluated left to right and evaluation stops at the first success.

    Arguments:
    ---------
    *tests:
        Callables to combine. If none are given, the result rejects everything.

    Returns:
    -------
    Function taking an item (and keyword arguments) and returning a bool.

    """

    def _any(item: Any, /, **kwargs) -> bool:
        return any(t(item, **kwargs) for t in tests)

    return _any


def negate(test: Test) -> Callable[..., bool]:
    """Make a test that passes exactly when the given test fails."""

    def _not(item: Any, /, **kwargs) -> bool:
        return not test(item, **kwargs)

    return _not
