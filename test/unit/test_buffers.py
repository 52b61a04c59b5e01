"""Unit tests for :mod:`~tmlt.prng.buffers`."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

from unittest import TestCase

import numpy as np
from parameterized import parameterized

from tmlt.prng.bigint import BigInteger
from tmlt.prng.buffers import fill_bit_range, fill_bytes, random_bytes
from tmlt.prng.exceptions import InvalidArgumentError
from tmlt.prng.generator import Random


def _expected_bytes(seed: int, size: int) -> bytes:
    """Returns the bytes fill_bytes should write from ``seed``."""
    rng = Random(seed)
    data = b"".join(rng.step().to_bytes(4, "little") for _ in range(-(-size // 4)))
    return data[:size]


class TestFillBytes(TestCase):
    """Tests for :func:`~tmlt.prng.buffers.fill_bytes`."""

    @parameterized.expand([(1,), (3,), (4,), (6,), (17,), (64,)])
    def test_little_endian_words(self, size: int):
        """Draws are written as little-endian words, truncating the last one."""
        buffer = bytearray(size)
        rng = Random(19)
        fill_bytes(rng, buffer)
        self.assertEqual(bytes(buffer), _expected_bytes(19, size))
        reference = Random(19)
        for _ in range(-(-size // 4)):
            reference.step()
        self.assertEqual(rng, reference)

    def test_partial_size(self):
        """Only the first size_in_bytes bytes are overwritten."""
        buffer = bytearray(b"\xaa" * 10)
        fill_bytes(Random(19), buffer, 5)
        self.assertEqual(bytes(buffer[:5]), _expected_bytes(19, 5))
        self.assertEqual(bytes(buffer[5:]), b"\xaa" * 5)

    def test_zero_size_is_noop(self):
        """Filling zero bytes changes neither the buffer nor the seed."""
        buffer = bytearray(b"abc")
        rng = Random(19)
        fill_bytes(rng, buffer, 0)
        fill_bytes(rng, bytearray())
        self.assertEqual(buffer, bytearray(b"abc"))
        self.assertEqual(rng.seed, 19)

    def test_numpy_and_memoryview(self):
        """Any contiguous writable buffer can be filled."""
        array = np.zeros(3, dtype="<u4")
        Random(23).fill_bytes(array)
        reference = Random(23)
        np.testing.assert_array_equal(
            array, np.array([reference.step() for _ in range(3)], dtype="<u4")
        )

        buffer = bytearray(8)
        fill_bytes(Random(23), memoryview(buffer)[2:])
        self.assertEqual(bytes(buffer[:2]), b"\x00\x00")
        self.assertEqual(bytes(buffer[2:]), _expected_bytes(23, 6))

    @parameterized.expand(
        [
            (b"read only", None),
            (bytearray(4), -1),
            (bytearray(4), 5),
            (memoryview(bytearray(8))[::2], None),
            ("not a buffer", None),
        ]
    )
    def test_invalid(self, buffer, size):
        """Read-only, non-contiguous or too small buffers are rejected."""
        rng = Random(29)
        with self.assertRaises(InvalidArgumentError):
            fill_bytes(rng, buffer, size)
        self.assertEqual(rng.seed, 29)

    def test_random_bytes(self):
        """random_bytes returns the bytes fill_bytes would write."""
        self.assertEqual(random_bytes(Random(31), 7), _expected_bytes(31, 7))
        self.assertEqual(Random(31).random_bytes(0), b"")
        with self.assertRaises(InvalidArgumentError):
            random_bytes(Random(31), -1)


class TestFillBitRange(TestCase):
    """Tests for :func:`~tmlt.prng.buffers.fill_bit_range`."""

    @parameterized.expand(
        [(0, 1), (0, 32), (4, 36), (31, 2), (32, 32), (5, 100), (70, 3)]
    )
    def test_only_range_changes(self, start_bit: int, num_bits: int):
        """Bits inside the range come from whole draws; others are kept."""
        original = (1 << 200) - 1 - (0x5555 << 60)
        target = BigInteger(original)
        fill_bit_range(Random(37), target, start_bit, num_bits)

        reference = Random(37)
        end_bit = start_bit + num_bits
        first_word = start_bit // 32
        last_word = (end_bit - 1) // 32
        random_bits = 0
        for word in range(first_word, last_word + 1):
            random_bits |= reference.step() << (32 * word)
        mask = ((1 << num_bits) - 1) << start_bit
        self.assertEqual(int(target), (original & ~mask) | (random_bits & mask))

    def test_one_draw_per_word(self):
        """Each 32-bit word touched by the range costs exactly one draw."""
        rng = Random(41)
        fill_bit_range(rng, BigInteger(), 30, 4)
        reference = Random(41)
        reference.step()
        reference.step()
        self.assertEqual(rng, reference)

    def test_zero_bits_is_noop(self):
        """Filling zero bits changes neither the target nor the seed."""
        target = BigInteger(12345)
        rng = Random(43)
        fill_bit_range(rng, target, 7, 0)
        rng.fill_bit_range(target, 0, 0)
        self.assertEqual(int(target), 12345)
        self.assertEqual(rng.seed, 43)

    @parameterized.expand([(-1, 5), (0, -1), (-3, -3)])
    def test_negative_arguments(self, start_bit: int, num_bits: int):
        """Negative start or length is rejected without touching anything."""
        target = BigInteger(99)
        rng = Random(47)
        with self.assertRaises(InvalidArgumentError):
            fill_bit_range(rng, target, start_bit, num_bits)
        self.assertEqual(int(target), 99)
        self.assertEqual(rng.seed, 47)
