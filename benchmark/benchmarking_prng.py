"""Benchmarking script for the random number generator."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import time
from typing import Callable

from tmlt.prng.bigint import BigInteger
from tmlt.prng.generator import Random
from tmlt.prng.ranges import Range


def evaluate_runtime(draw: Callable[[], object], repetitions: int) -> float:
    """Returns the running time for calling ``draw`` repeatedly."""
    start = time.time()
    for _ in range(repetitions):
        draw()
    running_time = time.time() - start
    return round(running_time, 3)


def main():
    """Evaluate running time for the generator's operations."""
    rng = Random(20230101)
    buffer = bytearray(4096)
    target = BigInteger()
    cases = [
        ("next_int", rng.next_int),
        ("next_int64", rng.next_int64),
        ("next_double", rng.next_double),
        ("next_int_below(10)", lambda: rng.next_int_below(10)),
        ("next_int_in_range(-5, 5)", lambda: rng.next_int_in_range(Range(-5, 5))),
        ("next_large_number(2**200)", lambda: rng.next_large_number(2 ** 200 - 1)),
        ("fill_bytes(4096)", lambda: rng.fill_bytes(buffer)),
        ("fill_bit_range(0, 256)", lambda: rng.fill_bit_range(target, 0, 256)),
    ]
    print(f"{'Operation':<30}{'Repetitions':>12}{'Running Time (s)':>20}")
    for name, draw in cases:
        for repetitions in [1000, 10000]:
            running_time = evaluate_runtime(draw, repetitions)
            print(f"{name:<30}{repetitions:>12}{running_time:>20}")


if __name__ == "__main__":
    main()
