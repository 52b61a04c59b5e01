"""Drive NumPy's random distributions from a :class:`~tmlt.prng.generator.Random`."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

from typing import Any, Dict

import numpy as np
from randomgen.wrapper import UserBitGenerator  # pylint: disable=no-name-in-module

from tmlt.prng.generator import Random


def as_bit_generator(rng: Random) -> UserBitGenerator:
    """Returns a NumPy bit generator that takes its raw output from ``rng``.

    Each 32-bit value NumPy requests is one :meth:`~tmlt.prng.generator.Random.step`
    of ``rng``, so the wrapped generator and ``rng`` share one sequence. The
    bit generator's ``state`` reads and writes the seed of ``rng``.

    Args:
        rng: Generator to wrap. It is not copied.
    """

    def next_raw(_: Any) -> int:
        return rng.step()

    def get_state() -> Dict[str, Any]:
        return {"bit_generator": "tmlt.prng.Random", "seed": rng.seed}

    def set_state(state: Dict[str, Any]) -> None:
        rng.set_seed(int(state["seed"]))

    return UserBitGenerator(
        next_raw, 32, state_getter=get_state, state_setter=set_state
    )


def as_numpy_generator(rng: Random) -> np.random.Generator:
    """Returns a :class:`numpy.random.Generator` driven by ``rng``.

    Args:
        rng: Generator to wrap. It is not copied.
    """
    return np.random.Generator(as_bit_generator(rng))
