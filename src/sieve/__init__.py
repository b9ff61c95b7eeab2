"""Lazy iterables that serve only the items of a source passing a test."""
# __init__ doesn't use the imported objects
# ruff: noqa: F401
from .filter import Filter, FilteringIterator
from .util import all_of, any_of, negate
