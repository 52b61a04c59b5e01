"""Unit tests for :mod:`~tmlt.prng.ambient`."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import threading
from typing import List
from unittest import TestCase

from tmlt.prng.ambient import system_random
from tmlt.prng.exceptions import CrossThreadAccessError
from tmlt.prng.generator import Random
from tmlt.prng.utils.configuration import Config
from tmlt.prng.utils.testing import run_on_thread


class TestSystemRandom(TestCase):
    """Tests for :func:`~tmlt.prng.ambient.system_random`."""

    def setUp(self):
        """Remember the thread affinity setting."""
        self._check_thread_affinity = Config.check_thread_affinity()

    def tearDown(self):
        """Restore the thread affinity setting."""
        Config.set_check_thread_affinity(self._check_thread_affinity)

    def test_same_instance_per_thread(self):
        """Repeated calls on one thread return the same generator."""
        rng = system_random()
        self.assertIsInstance(rng, Random)
        self.assertIs(system_random(), rng)
        other = run_on_thread(lambda: (system_random(), system_random()))
        self.assertIs(other[0], other[1])

    def test_distinct_instances_across_threads(self):
        """Each thread gets its own, differently seeded generator."""
        instances: List[Random] = []
        lock = threading.Lock()

        def collect():
            rng = system_random()
            rng.next_int()
            with lock:
                instances.append(rng)

        threads = [threading.Thread(target=collect) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        instances.append(system_random())
        self.assertEqual(len({id(rng) for rng in instances}), len(instances))
        self.assertEqual(len({rng.seed for rng in instances}), len(instances))

    def test_threads_do_not_share_state(self):
        """Advancing one thread's generator leaves another thread's untouched."""
        rng = system_random()
        seed = rng.seed
        run_on_thread(lambda: [system_random().next_int() for _ in range(100)])
        self.assertEqual(rng.seed, seed)

    def test_cross_thread_use_detected(self):
        """With the check enabled, another thread can't advance the instance."""
        Config.set_check_thread_affinity(True)
        rng = run_on_thread(system_random)
        with self.assertRaises(CrossThreadAccessError):
            rng.next_int()
        rng.set_seed(5)
        self.assertEqual(rng.seed, 5)

    def test_cross_thread_use_unchecked(self):
        """Without the check, misuse isn't detected."""
        Config.set_check_thread_affinity(False)
        rng = run_on_thread(system_random)
        rng.next_int()

    def test_owner_thread_passes_check(self):
        """The owning thread can use its instance with the check enabled."""
        Config.set_check_thread_affinity(True)
        values = run_on_thread(lambda: [system_random().next_int() for _ in range(10)])
        self.assertEqual(len(values), 10)
