"""Tumult PRNG: a fast, deterministic, seeded random number generator.

Create a :class:`Random` with a seed to get a reproducible sequence, or call
:func:`system_random` to use the calling thread's own randomly seeded
instance::

    >>> from tmlt.prng import Random
    >>> rng = Random(1)
    >>> rng.next_int()
    384748
    >>> 0 <= rng.next_int_below(10) < 10
    True
"""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

from tmlt.prng.ambient import system_random
from tmlt.prng.bigint import BigInteger, BitSequence
from tmlt.prng.exceptions import CrossThreadAccessError, InvalidArgumentError
from tmlt.prng.generator import Random
from tmlt.prng.ranges import Range

__all__ = [
    "BigInteger",
    "BitSequence",
    "CrossThreadAccessError",
    "InvalidArgumentError",
    "Random",
    "Range",
    "system_random",
]
