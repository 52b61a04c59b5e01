"""Mapping of raw draws onto bounded integers without modulo bias."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from tmlt.prng.exceptions import InvalidArgumentError
from tmlt.prng.large_numbers import next_large_number

if TYPE_CHECKING:
    from tmlt.prng.generator import Random

MAX_BOUND = (1 << 31) - 1
"""Largest upper bound accepted by :func:`bounded_int`."""

_INT31_MASK = 0x7FFFFFFF
_INT31_LIMIT = 1 << 31


@dataclass(frozen=True)
class Range:
    """A half-open range of integers, ``[start, end)``."""

    start: int
    """First value in the range."""

    end: int
    """First value past the end of the range."""

    @classmethod
    def from_range(cls, values: range) -> Range:
        """Converts a builtin :class:`range` with step 1."""
        if values.step != 1:
            raise InvalidArgumentError(
                f"Only ranges with step 1 can be sampled from, not step {values.step}"
            )
        return cls(values.start, values.stop)

    @property
    def length(self) -> int:
        """Returns ``end - start``, which is negative for inverted ranges."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Returns True if the range contains no values."""
        return self.end <= self.start

    def __contains__(self, value: int) -> bool:
        """Returns True if ``start <= value < end``."""
        return self.start <= value < self.end


def bounded_int(rng: Random, max_value: int) -> int:
    """Returns a uniformly distributed integer in ``[0, max_value)``.

    When ``max_value`` is a power of two the low bits of a single draw are
    used directly. Otherwise 31-bit candidates are drawn, and candidates in the
    incomplete final block of ``2**31 mod max_value`` values are rejected, so
    every result is exactly equally likely.

    Args:
        rng: Generator to draw from.
        max_value: Exclusive upper bound, between 1 and :data:`MAX_BOUND`.
    """
    if isinstance(max_value, bool):
        raise InvalidArgumentError("max_value must be an int, not a bool")
    if max_value <= 0:
        raise InvalidArgumentError(f"max_value must be positive, not {max_value}")
    if max_value > MAX_BOUND:
        raise InvalidArgumentError(
            f"max_value must be at most {MAX_BOUND}, not {max_value}"
        )
    if max_value & (max_value - 1) == 0:
        return rng.next_int() & (max_value - 1)
    # Less than half of all candidates can be rejected, so the expected number
    # of iterations is below 2.
    while True:
        candidate = rng.next_int() & _INT31_MASK
        value = candidate % max_value
        # A signed 32-bit sum here would overflow exactly for the biased tail.
        if candidate - value + (max_value - 1) < _INT31_LIMIT:
            return value


def bounded_int_in_range(rng: Random, values: Union[Range, range]) -> int:
    """Returns a uniformly distributed integer in ``[values.start, values.end)``.

    Ranges up to :data:`MAX_BOUND` long use :func:`bounded_int`. Longer ranges,
    such as the full signed 32-bit range, are drawn with
    :func:`~tmlt.prng.large_numbers.next_large_number`, which is also exact.

    Args:
        rng: Generator to draw from.
        values: Non-empty range to draw from. Builtin ranges must have step 1.
    """
    if isinstance(values, range):
        values = Range.from_range(values)
    if values.is_empty:
        raise InvalidArgumentError(
            f"Cannot draw from empty range [{values.start}, {values.end})"
        )
    if values.length > MAX_BOUND:
        return values.start + next_large_number(rng, values.length)
    return values.start + bounded_int(rng, values.length)
