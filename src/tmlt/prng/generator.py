"""Tumult PRNG's deterministic random number generator."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import logging
import threading
from typing import Any, Dict, Optional, Union

from typeguard import typechecked

from tmlt.prng.bigint import BigInteger, BitSequence
from tmlt.prng.buffers import fill_bit_range, fill_bytes, random_bytes
from tmlt.prng.exceptions import CrossThreadAccessError
from tmlt.prng.large_numbers import next_large_number
from tmlt.prng.ranges import Range, bounded_int, bounded_int_in_range
from tmlt.prng.seed import (
    LCG_INCREMENT,
    LCG_MULTIPLIER,
    STATE_BITS,
    STATE_MASK,
    entropy_sources,
    fold_into_pool,
    mix_seed,
    to_int64,
)

_logger = logging.getLogger(__name__)

_DRAW_SHIFT = STATE_BITS - 32
_FLOAT_SCALE = float(1 << 24)
_DOUBLE_SCALE = float(1 << 53)


class Random:
    """A seeded pseudo-random number generator.

    Two instances with the same :attr:`seed` produce identical sequences, on
    any platform and in any process. Each draw advances a 48-bit linear
    congruential generator (see :mod:`tmlt.prng.seed`) and returns the top 32
    bits of the new state; every other value is derived from those draws.

    Instances are not thread safe. Either give each thread its own instance
    (:func:`~tmlt.prng.ambient.system_random` does this for you) or guard a
    shared instance with a lock.

    This generator is not suitable for cryptography: its future output can be
    predicted from a few observed draws.
    """

    @typechecked
    def __init__(self, seed: Optional[int] = None):
        """Constructor.

        Args:
            seed: Initial seed. If None, the generator is seeded from the
                current time and other host properties with
                :meth:`set_seed_randomly`.
        """
        self._seed = 0
        self._owner: Optional[int] = None
        if seed is None:
            self.set_seed_randomly()
        else:
            self.set_seed(seed)

    @property
    def seed(self) -> int:
        """Returns the current seed, a signed 64-bit integer."""
        return self._seed

    @typechecked
    def set_seed(self, seed: int) -> None:
        """Replaces the seed, restarting the sequence it determines.

        Args:
            seed: New seed. Values outside the signed 64-bit range are wrapped.
        """
        self._seed = to_int64(seed)

    @typechecked
    def combine_seed(self, value: int) -> None:
        """Merges ``value`` into the current seed.

        The new seed depends on both the old seed and ``value``, and a small
        change to either gives an unrelated sequence. Calling this with the same
        value from the same seed always gives the same result.

        Args:
            value: Value to merge into the seed.
        """
        self._seed = mix_seed(self._seed, value)

    def set_seed_randomly(self) -> None:
        """Reseeds from the time, thread and process identity, and similar.

        The old seed is mixed in too, so calling this repeatedly only adds
        variation. The result is hard to collide with by accident, but is not
        secret.
        """
        for value in entropy_sources(self):
            self.combine_seed(value)
        fold_into_pool(self._seed)
        _logger.debug("Seeded generator %#x randomly", id(self))

    def step(self) -> int:
        """Advances the state and returns the next 32 random bits.

        Returns:
            An unsigned integer in ``[0, 2**32)``.
        """
        if self._owner is not None:
            self._check_owner()
        self._seed = (self._seed * LCG_MULTIPLIER + LCG_INCREMENT) & STATE_MASK
        return self._seed >> _DRAW_SHIFT

    def next_int(self) -> int:
        """Returns a random integer from the full signed 32-bit range."""
        bits = self.step()
        return bits - (1 << 32) if bits >> 31 else bits

    def next_int64(self) -> int:
        """Returns a random integer from the full signed 64-bit range.

        Consumes two draws; the first one forms the high half.
        """
        high = self.step()
        low = self.step()
        return to_int64((high << 32) | low)

    def next_float(self) -> float:
        """Returns a random float in ``[0, 1)`` with 24 bits of precision."""
        return (self.step() >> 8) / _FLOAT_SCALE

    def next_double(self) -> float:
        """Returns a random float in ``[0, 1)`` with 53 bits of precision.

        Consumes two draws, taking 26 bits from the first and 27 from the second.
        """
        high = self.step() >> 6
        low = self.step() >> 5
        return ((high << 27) | low) / _DOUBLE_SCALE

    def next_bool(self) -> bool:
        """Returns True or False with equal probability."""
        return self.step() & 1 != 0

    @typechecked
    def next_int_below(self, max_value: int) -> int:
        """Returns a random integer in ``[0, max_value)``.

        See :func:`~tmlt.prng.ranges.bounded_int`.

        Args:
            max_value: Exclusive upper bound. Must be positive.
        """
        return bounded_int(self, max_value)

    @typechecked
    def next_int_in_range(self, values: Union[Range, range]) -> int:
        """Returns a random integer in ``[values.start, values.end)``.

        See :func:`~tmlt.prng.ranges.bounded_int_in_range`.

        Args:
            values: Non-empty range to draw from.
        """
        return bounded_int_in_range(self, values)

    @typechecked
    def next_large_number(
        self, bound: Union[int, BitSequence]
    ) -> Union[int, BigInteger]:
        """Returns a random integer in ``[0, bound)`` for a bound of any size.

        See :func:`~tmlt.prng.large_numbers.next_large_number`.

        Args:
            bound: Exclusive upper bound. Must be positive.
        """
        return next_large_number(self, bound)

    @typechecked
    def fill_bytes(self, buffer: Any, size_in_bytes: Optional[int] = None) -> None:
        """Overwrites the start of ``buffer`` with random bytes.

        See :func:`~tmlt.prng.buffers.fill_bytes`.

        Args:
            buffer: Contiguous writable buffer.
            size_in_bytes: Number of bytes to write. Defaults to the whole buffer.
        """
        fill_bytes(self, buffer, size_in_bytes)

    @typechecked
    def random_bytes(self, size: int) -> bytes:
        """Returns ``size`` random bytes."""
        return random_bytes(self, size)

    @typechecked
    def fill_bit_range(self, target: Any, start_bit: int, num_bits: int) -> None:
        """Sets bits ``[start_bit, start_bit + num_bits)`` of ``target`` randomly.

        See :func:`~tmlt.prng.buffers.fill_bit_range`.

        Args:
            target: Arbitrary-precision value to modify in place.
            start_bit: Index of the lowest bit to set.
            num_bits: Number of bits to set.
        """
        fill_bit_range(self, target, start_bit, num_bits)

    def copy(self) -> "Random":
        """Returns an independent generator with the same seed."""
        return Random(self._seed)

    def __copy__(self) -> "Random":
        """Returns an independent generator with the same seed."""
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Random":
        """Returns an independent generator with the same seed."""
        return self.copy()

    def __eq__(self, other: Any) -> bool:
        """Returns True if both generators will produce the same sequence."""
        if not isinstance(other, Random):
            return NotImplemented
        return self._seed == other._seed

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        """Returns a string representation."""
        return f"Random(seed={self._seed})"

    def _bind_to_thread(self, owner: int) -> None:
        """Makes every draw check that it runs on thread ``owner``."""
        self._owner = owner

    def _check_owner(self) -> None:
        """Raises an error if the calling thread doesn't own this generator."""
        caller = threading.get_ident()
        if caller != self._owner:
            raise CrossThreadAccessError(self._owner, caller)
