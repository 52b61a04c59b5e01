r"""Seed arithmetic shared by all generators.

The state of a :class:`~tmlt.prng.generator.Random` is a single signed 64-bit
integer. Each draw advances it with the 48-bit linear congruential recurrence

.. math::

    s' = (s \cdot A + C) \bmod 2^{48}

using the constants of the ``drand48`` family, :data:`LCG_MULTIPLIER` and
:data:`LCG_INCREMENT`. Reseeding operations mix new values into the state with
the SplitMix64 finaliser, which gives every output bit a dependency on every
input bit.
"""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import logging
import os
import threading
import time
from typing import Any, List

_logger = logging.getLogger(__name__)

LCG_MULTIPLIER = 0x5DEECE66D
"""Multiplier :math:`A` of the linear congruential recurrence."""

LCG_INCREMENT = 0xB
"""Increment :math:`C` of the linear congruential recurrence."""

STATE_BITS = 48
"""Number of low seed bits that take part in the recurrence."""

STATE_MASK = (1 << STATE_BITS) - 1
"""Mask reducing a value modulo :math:`2^{48}`."""

_MASK_64 = (1 << 64) - 1

_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX_1 = 0xBF58476D1CE4E5B9
_MIX_2 = 0x94D049BB133111EB

_pool_lock = threading.Lock()
_pool = 0


def to_int64(value: int) -> int:
    """Wraps an integer into the signed 64-bit range, like a C ``int64`` cast."""
    value &= _MASK_64
    return value - (1 << 64) if value >> 63 else value


def _splitmix64(value: int) -> int:
    """Returns the SplitMix64 output for the unsigned 64-bit ``value``."""
    z = (value + _GOLDEN_GAMMA) & _MASK_64
    z = ((z ^ (z >> 30)) * _MIX_1) & _MASK_64
    z = ((z ^ (z >> 27)) * _MIX_2) & _MASK_64
    return z ^ (z >> 31)


def mix_seed(seed: int, value: int) -> int:
    """Returns a new seed that depends on both ``seed`` and ``value``.

    This is a pure function: the same arguments always give the same result.
    Flipping a single bit of either argument flips about half of the bits of
    the result.

    Args:
        seed: The current seed.
        value: The value to merge into the seed. Only its low 64 bits are used.
    """
    return to_int64(_splitmix64((seed & _MASK_64) ^ _splitmix64(value & _MASK_64)))


def entropy_sources(instance: Any) -> List[int]:
    """Returns weakly random observables to fold into a seed.

    None of these are secret; they only make it unlikely that two generators
    created close together, or on the same thread, end up with equal seeds.

    Args:
        instance: The generator being seeded. Its identity decorrelates
            instances created during the same clock tick.
    """
    with _pool_lock:
        pool = _pool
    return [
        pool,
        id(instance),
        time.time_ns(),
        time.perf_counter_ns(),
        threading.get_ident(),
        os.getpid(),
    ]


def fold_into_pool(seed: int) -> None:
    """Merges a freshly generated seed into the process-wide entropy pool."""
    global _pool  # pylint: disable=global-statement
    with _pool_lock:
        _pool = to_int64(_pool ^ seed)
    _logger.debug("Folded new seed into process-wide entropy pool")
