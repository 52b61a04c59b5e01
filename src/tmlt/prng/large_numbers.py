"""Uniform sampling of arbitrary-precision integers below a bound."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023
from __future__ import annotations

from typing import TYPE_CHECKING, overload

from tmlt.prng.bigint import BigInteger, BitSequence
from tmlt.prng.buffers import fill_bit_range
from tmlt.prng.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from tmlt.prng.generator import Random


@overload
def next_large_number(rng: Random, bound: int) -> int:
    ...


@overload
def next_large_number(rng: Random, bound: BitSequence) -> BigInteger:
    ...


def next_large_number(rng, bound):  # pylint: disable=missing-type-doc
    """Returns a uniformly distributed integer in ``[0, bound)``.

    Candidates are built from ``bound.bit_length()`` fresh random bits and
    rejected if they are not below ``bound``. Since the highest bit of
    ``bound`` is set, at least half of all candidates are accepted, so the
    expected number of rounds is at most 2.

    Args:
        rng: Generator to draw from.
        bound: Exclusive upper bound. Either a positive :class:`int`, in which
            case an :class:`int` is returned, or any positive
            :class:`~tmlt.prng.bigint.BitSequence`, in which case a
            :class:`~tmlt.prng.bigint.BigInteger` is returned.
    """
    if isinstance(bound, bool):
        raise InvalidArgumentError("bound must be an int or a BitSequence, not a bool")
    as_int = isinstance(bound, int)
    limit: BitSequence
    if as_int:
        if bound <= 0:
            raise InvalidArgumentError(f"bound must be positive, not {bound}")
        limit = BigInteger(bound)
    elif isinstance(bound, BitSequence):
        limit = bound
    else:
        raise InvalidArgumentError(
            f"bound must be an int or a BitSequence, not {type(bound).__name__}"
        )
    num_bits = limit.bit_length()
    if num_bits == 0:
        raise InvalidArgumentError("bound must be positive, not 0")
    while True:
        candidate = BigInteger()
        fill_bit_range(rng, candidate, 0, num_bits)
        if candidate.compare_to(limit) < 0:
            return int(candidate) if as_int else candidate
