"""Utilities for testing."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import threading
from typing import Any, Callable, List, TypeVar

from tmlt.prng.bigint import compare_bits

T = TypeVar("T")


class BitList:
    """A minimal :class:`~tmlt.prng.bigint.BitSequence` storing one bool per bit.

    It implements nothing but the capability, so tests can check that sampling
    and filling don't rely on anything else.
    """

    def __init__(self, value: int = 0):
        """Constructor.

        Args:
            value: Initial non-negative value.
        """
        self.bits: List[bool] = [
            bool((value >> i) & 1) for i in range(value.bit_length())
        ]

    def bit_length(self) -> int:
        """Returns the index of the highest set bit plus one."""
        while self.bits and not self.bits[-1]:
            self.bits.pop()
        return len(self.bits)

    def get_bit(self, index: int) -> bool:
        """Returns the bit at ``index``."""
        return index < len(self.bits) and self.bits[index]

    def set_bit(self, index: int, value: bool) -> None:
        """Sets the bit at ``index``, growing the list if needed."""
        while len(self.bits) <= index:
            self.bits.append(False)
        self.bits[index] = value

    def compare_to(self, other: Any) -> int:
        """Compares bit by bit."""
        return compare_bits(self, other)

    def __int__(self) -> int:
        """Returns the value as a Python int."""
        return sum(1 << i for i, bit in enumerate(self.bits) if bit)


def run_on_thread(func: Callable[[], T]) -> T:
    """Runs ``func`` on a new thread, waits for it, and returns its result.

    Exceptions raised by ``func`` are re-raised on the calling thread.
    """
    results: List[Any] = []
    errors: List[BaseException] = []

    def target():
        try:
            results.append(func())
        except BaseException as e:  # pylint: disable=broad-except
            errors.append(e)

    thread = threading.Thread(target=target)
    thread.start()
    thread.join()
    if errors:
        raise errors[0]
    return results[0]
