"""Bulk filling of byte buffers and bit ranges from a generator."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from tmlt.prng.bigint import BitSequence
from tmlt.prng.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from tmlt.prng.generator import Random

WORD_BITS = 32
"""Number of bits produced by a single draw."""

WORD_BYTES = WORD_BITS // 8


def _writable_bytes(buffer: Any) -> np.ndarray:
    """Returns a writable flat ``uint8`` view over ``buffer``."""
    try:
        memory = memoryview(buffer)
    except TypeError as e:
        raise InvalidArgumentError(f"Cannot fill buffer: {e}") from e
    if memory.readonly:
        raise InvalidArgumentError("Cannot fill a read-only buffer")
    if not memory.c_contiguous:
        raise InvalidArgumentError("Cannot fill a non-contiguous buffer")
    if memory.nbytes == 0:
        return np.zeros(0, dtype=np.uint8)
    return np.frombuffer(memory, dtype=np.uint8)


def fill_bytes(rng: Random, buffer: Any, size_in_bytes: Optional[int] = None) -> None:
    """Overwrites the start of ``buffer`` with random bytes.

    Draws are written as little-endian 32-bit words. If ``size_in_bytes`` isn't
    a multiple of four, one more word is drawn and only its low bytes are
    written.

    Args:
        rng: Generator to draw from.
        buffer: Any contiguous writable buffer, such as a :class:`bytearray`,
            a :class:`memoryview` or a numpy array.
        size_in_bytes: Number of bytes to write. Defaults to the whole buffer.
    """
    view = _writable_bytes(buffer)
    if size_in_bytes is None:
        size_in_bytes = view.size
    if size_in_bytes < 0:
        raise InvalidArgumentError(
            f"size_in_bytes must not be negative, not {size_in_bytes}"
        )
    if size_in_bytes > view.size:
        raise InvalidArgumentError(
            f"size_in_bytes ({size_in_bytes}) is larger than the buffer ({view.size})"
        )
    if size_in_bytes == 0:
        return
    num_words = -(-size_in_bytes // WORD_BYTES)
    words = np.fromiter((rng.step() for _ in range(num_words)), dtype="<u4")
    view[:size_in_bytes] = words.view(np.uint8)[:size_in_bytes]


def random_bytes(rng: Random, size: int) -> bytes:
    """Returns ``size`` random bytes, drawn the same way as :func:`fill_bytes`."""
    if size < 0:
        raise InvalidArgumentError(f"size must not be negative, not {size}")
    if size == 0:
        return b""
    buffer = bytearray(size)
    fill_bytes(rng, buffer)
    return bytes(buffer)


def fill_bit_range(
    rng: Random, target: BitSequence, start_bit: int, num_bits: int
) -> None:
    """Sets bits ``[start_bit, start_bit + num_bits)`` of ``target`` randomly.

    Every 32-bit aligned word that overlaps the range costs one draw; bits of
    the first and last word that fall outside the range are masked off, and
    all other bits of ``target`` keep their values.

    Args:
        rng: Generator to draw from.
        target: Arbitrary-precision value to modify in place.
        start_bit: Index of the lowest bit to set.
        num_bits: Number of bits to set.
    """
    if start_bit < 0:
        raise InvalidArgumentError(f"start_bit must not be negative, not {start_bit}")
    if num_bits < 0:
        raise InvalidArgumentError(f"num_bits must not be negative, not {num_bits}")
    if num_bits == 0:
        return
    end_bit = start_bit + num_bits
    for word in range(start_bit // WORD_BITS, (end_bit - 1) // WORD_BITS + 1):
        bits = rng.step()
        word_start = word * WORD_BITS
        first = max(start_bit, word_start)
        last = min(end_bit, word_start + WORD_BITS)
        for index in range(first, last):
            target.set_bit(index, bool((bits >> (index - word_start)) & 1))
