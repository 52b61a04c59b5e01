"""Example illustrating seeded and per-thread generators."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import threading

from tmlt.prng import BigInteger, Random, Range, system_random


def main():
    """Main function."""
    rng = Random(1)
    print("First draws from seed 1:", [rng.next_int() for _ in range(3)])

    rng.set_seed(1)
    print("Same draws after reseeding:", [rng.next_int() for _ in range(3)])

    print("Dice rolls:", [rng.next_int_in_range(Range(1, 7)) for _ in range(10)])

    bound = BigInteger(2 ** 128 - 159)
    print("Below a 128-bit bound:", int(rng.next_large_number(bound)))
    print("Sixteen bytes:", rng.random_bytes(16).hex())

    def roll():
        # Each thread gets its own randomly seeded generator.
        local = system_random()
        print(f"{threading.current_thread().name}: {local.next_int_below(6) + 1}")

    threads = [threading.Thread(target=roll, name=f"worker-{i}") for i in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


if __name__ == "__main__":
    main()
