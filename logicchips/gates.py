"""Bit-level logic gates that work on the least significant bit of each input."""

from __future__ import annotations

import operator
from functools import reduce

_MASK = 0x0001


def _combine(op, args: tuple[int, ...]) -> int:
    if not args:
        raise TypeError("a gate needs at least one input")
    return reduce(op, args)


def nand(*args: int) -> int:
    """Return the NAND of all inputs as 0 or 1."""
    return ~_combine(operator.and_, args) & _MASK


def nor(*args: int) -> int:
    """Return the NOR of all inputs as 0 or 1."""
    return ~_combine(operator.or_, args) & _MASK


def and_(*args: int) -> int:
    """Return the AND of all inputs as 0 or 1."""
    return _combine(operator.and_, args) & _MASK


def not_(value: int) -> int:
    """Return the inverse of the input as 0 or 1."""
    return ~value & _MASK


def buffer(value: int) -> int:
    """Pass the input through as 0 or 1."""
    return value & _MASK