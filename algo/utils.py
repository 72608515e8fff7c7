"""Small helpers shared by the algorithms."""

from __future__ import annotations

import random
import sys
from collections.abc import Container, Mapping, MutableSequence
from typing import Any, TextIO


def swap(seq: MutableSequence[Any], i: int, j: int) -> None:
    """Swap the items at positions i and j of seq in place."""
    seq[i], seq[j] = seq[j], seq[i]


def minmax(*args: int) -> tuple[int, int]:
    """Return the smallest and largest of the arguments."""
    if not args:
        raise ValueError("minmax() needs at least one argument")
    return min(args), max(args)


def minimum(*args: int) -> int:
    """Return the smallest of the arguments."""
    if not args:
        raise ValueError("minimum() needs at least one argument")
    return min(args)


def maximum(*args: int) -> int:
    """Return the largest of the arguments."""
    if not args:
        raise ValueError("maximum() needs at least one argument")
    return max(args)


def random_between(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer in [low, high), or low when both bounds are equal."""
    if low == high:
        return low
    if high < low:
        raise ValueError(f"empty range: {low} to {high}")
    source = rng if rng is not None else random
    return source.randrange(low, high)


def contains(seq: Container[Any], target: Any) -> bool:
    """Report whether target is in seq."""
    return target in seq


def abs_diff(a: int, b: int) -> int:
    """Return the absolute difference between a and b."""
    return abs(a - b)


def is_more_than_1_apart(a: int, b: int) -> bool:
    """Report whether a and b differ by more than one."""
    return abs_diff(a, b) > 1


def is_less_than_1_apart(a: int, b: int) -> bool:
    """Report whether a and b differ by at most one."""
    return abs_diff(a, b) <= 1


def log_context(context: Mapping[str, Any], file: TextIO | None = None) -> None:
    """Print a block of debugging key/value pairs."""
    out = file if file is not None else sys.stdout
    print("[debug] →", file=out)
    for key, value in context.items():
        print(f"\t{key}: {value!r}", file=out)
    print("[debug] □", file=out)