"""Provides lazy iteration that skips over source items failing a test.

Suppose you have the list [7, 6, -2, 5] and only want the even numbers. Iterating
over FilteringIterator(<source>, test=lambda x: x % 2 == 0) gives 6 and then -2,
each computed only when asked for. Unlike the builtin filter, FilteringIterator
keeps the next accepted item in a look-ahead buffer, so whether anything remains
can be checked (has_next) or inspected (peek) without consuming it.

Functionality is provided by FilteringIterator (one pass over a source) and
Filter (a re-iterable wrapper that builds a new FilteringIterator per iteration).
"""
from typing import (
    Any,
    Final,
    Iterable,
    Iterator,
    Callable,
    TypeVar,
    Union,
    overload,
)
import logging

logger = logging.getLogger(__name__)

A = TypeVar("A")
D = TypeVar("D")

# marks an exhausted look-ahead; None is a valid item so it cannot be used
_EXHAUSTED: Final = object()
# marks that no default was given to peek
_MISSING: Final = object()


def _check_arguments(source: Any, test: Any) -> None:
    """Raise ValueError if source or test are unusable.

    Each argument is checked on its own so that the message names the bad one.
    """
    if source is None:
        raise ValueError("source must not be None.")
    if test is None:
        raise ValueError("test must not be None.")
    if not callable(test):
        raise ValueError("test must be callable.")


class FilteringIterator(Iterator[A]):
    """Iterator serving only the items of a source that pass a test.

    The next accepted item is always held in a one item look-ahead buffer. This
    buffer is filled during initialization: the source is pulled from until an
    item passes the test or the source runs out. Initialization may therefore do
    an arbitrary amount of work, and any error raised by the source or the test
    while doing so is raised from the constructor.

    Each source item is given to the test exactly once, in source order, and the
    accepted items are served in that same order. Once the source is exhausted
    the iterator stays exhausted.

    Calling next on an exhausted instance raises StopIteration, as any python
    iterator does. Use next(it, None) to get None instead.

    If the source or the test raises while next is fetching the item after the
    one being served, the error is raised from next and the item that would
    have been served stays buffered: has_next stays True and peek or the next
    call to next returns it.

    Attributes:
    ----------
    source:
        Iterator being drawn from. Nothing else should pull from it once it is
        wrapped, or items will be skipped without being tested.
    test:
        Callable applied to each item; truthy results mean the item is served.
    aux_args:
        Keyword arguments passed to test at each call.

    """

    def __init__(
        self,
        source: Iterable[A],
        test: Callable[..., Any],
        **kwargs,
    ) -> None:
        """Initialize and fetch the first accepted item.

        Arguments:
        ---------
        source:
            Iterable of objects to iterate over. iter is called on it once.
        test:
            Function which we apply to each item drawn from source. If it
            returns a truthy value, we serve that item; if not, we skip it.
        **kwargs:
            Stored and passed to test at each call.

        """
        _check_arguments(source, test)
        self.source = iter(source)
        self.test = test
        self.aux_args = kwargs
        self._scanned = 0
        self._accepted = 0
        self._pending: Any = self._fetch()

    def __iter__(self) -> Iterator[A]:
        """Return self."""
        return self

    def __next__(self) -> A:
        """Serve the buffered item and fetch the next accepted one."""
        if self._pending is _EXHAUSTED:
            raise StopIteration
        current = self._pending
        self._pending = self._fetch()
        return current

    def has_next(self) -> bool:
        """Return whether another item will be served.

        This does not change the state of the iterator.
        """
        return self._pending is not _EXHAUSTED

    @overload
    def peek(self) -> A:
        ...

    @overload
    def peek(self, default: D) -> Union[A, D]:
        ...

    def peek(self, default: Any = _MISSING) -> Any:
        """Return the item that the next call to next would serve.

        Arguments:
        ---------
        default:
            Returned if no items remain. If not given, a LookupError is raised
            instead.

        Returns:
        -------
        The buffered item, which is not consumed.

        """
        if self._pending is _EXHAUSTED:
            if default is _MISSING:
                raise LookupError("No elements remain.")
            return default
        return self._pending

    def _fetch(self) -> Any:
        """Pull from source until an item passes test.

        Returns:
        -------
        The first accepted item, or _EXHAUSTED if source ran out first.

        """
        for pull in self.source:
            self._scanned += 1
            if self.test(pull, **self.aux_args):
                self._accepted += 1
                return pull
        logger.debug(
            "Source exhausted after scanning %s items (%s accepted).",
            self._scanned,
            self._accepted,
        )
        return _EXHAUSTED

    def __repr__(self) -> str:
        state = "active" if self.has_next() else "exhausted"
        return f"{type(self).__name__}(test={self.test!r}, {state})"


class Filter(Iterable[A]):
    """Provides an iterable that filters out source iterates that fail a test.

    Suppose you have the list [1,5,3,7,9] and you wish to produce an iterable that
    only serves the numbers below 4; that is, iterating over the result would give
    [1,3]. This can be done with the Filter class via Filter(<source>,test=lambda
    x: x<4). More generally, Filter allows an arbitrary test to be evaluated.

    Each iteration creates a new FilteringIterator over source. If source can only
    be iterated once (e.g., it is a generator), later iterations serve nothing.
    """

    def __init__(
        self,
        source: Iterable[A],
        test: Callable[..., Any],
        **kwargs,
    ) -> None:
        """Initialize.

        No items are drawn from source until iteration begins.

        Arguments:
        ---------
        source:
            Iterable of objects to iterate over
        test:
            Function which we apply to each item drawn from source. If it
            returns a truthy value, we yield that item; if not, we skip it.
        **kwargs:
            Stored and passed to test at each call.

        """
        _check_arguments(source, test)
        self.source = source
        self.test = test
        self.aux_args = kwargs

    def __iter__(self) -> FilteringIterator[A]:
        """Iterate over input, only returning items which pass the test."""
        return FilteringIterator(self.source, self.test, **self.aux_args)
