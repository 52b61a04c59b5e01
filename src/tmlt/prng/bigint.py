"""Arbitrary-precision integers, as seen by the generator.

The sampling and filling routines only ever query the length of an
arbitrary-precision value, read and write single bits, and compare two values.
:class:`BitSequence` names that capability, so any integer type that provides
it can be used as a bound or as a fill target. :class:`BigInteger` is a small
mutable implementation backed by a Python :class:`int`.
"""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023
from __future__ import annotations

from functools import total_ordering
from typing import Any, Protocol, Union, runtime_checkable

from tmlt.prng.exceptions import InvalidArgumentError


@runtime_checkable
class BitSequence(Protocol):
    """Capability of a non-negative arbitrary-precision integer."""

    def bit_length(self) -> int:
        """Returns the index of the highest set bit plus one (0 for zero)."""

    def get_bit(self, index: int) -> bool:
        """Returns the bit at ``index``."""

    def set_bit(self, index: int, value: bool) -> None:
        """Sets the bit at ``index`` to ``value``."""

    def compare_to(self, other: Any) -> int:
        """Returns a negative, zero or positive number like a C comparator."""


def compare_bits(left: BitSequence, right: BitSequence) -> int:
    """Compares two values using only :class:`BitSequence` operations.

    Returns -1, 0 or 1 as ``left`` is less than, equal to or greater than
    ``right``.
    """
    left_length = left.bit_length()
    right_length = right.bit_length()
    if left_length != right_length:
        return -1 if left_length < right_length else 1
    for index in reversed(range(left_length)):
        left_bit = bool(left.get_bit(index))
        if left_bit != bool(right.get_bit(index)):
            return 1 if left_bit else -1
    return 0


@total_ordering
class BigInteger:
    """A mutable non-negative integer of unbounded size."""

    def __init__(self, value: Union[int, BigInteger] = 0):
        """Constructor.

        Args:
            value: Initial value. Must not be negative.
        """
        value = int(value)
        if value < 0:
            raise InvalidArgumentError(f"BigInteger must not be negative, not {value}")
        self._value = value

    def bit_length(self) -> int:
        """Returns the index of the highest set bit plus one (0 for zero)."""
        return self._value.bit_length()

    def get_bit(self, index: int) -> bool:
        """Returns the bit at ``index``."""
        if index < 0:
            raise InvalidArgumentError(f"Bit index must not be negative, not {index}")
        return bool((self._value >> index) & 1)

    def set_bit(self, index: int, value: bool) -> None:
        """Sets the bit at ``index`` to ``value``."""
        if index < 0:
            raise InvalidArgumentError(f"Bit index must not be negative, not {index}")
        if value:
            self._value |= 1 << index
        else:
            self._value &= ~(1 << index)

    def compare_to(self, other: Any) -> int:
        """Returns -1, 0 or 1 as this value is less than, equal to or above ``other``."""
        if isinstance(other, (BigInteger, int)):
            mine, theirs = self._value, int(other)
            return (mine > theirs) - (mine < theirs)
        return compare_bits(self, other)

    def copy(self) -> BigInteger:
        """Returns an independent copy."""
        return BigInteger(self._value)

    def __int__(self) -> int:
        """Returns the value as a Python int."""
        return self._value

    __index__ = __int__

    def __eq__(self, other: Any) -> bool:
        """Returns True if both values are equal."""
        if isinstance(other, (BigInteger, int, BitSequence)):
            return self.compare_to(other) == 0
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        """Returns True if this value is below ``other``."""
        if isinstance(other, (BigInteger, int, BitSequence)):
            return self.compare_to(other) < 0
        return NotImplemented

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        """Returns a string representation of the value."""
        return f"BigInteger({self._value:#x})"
