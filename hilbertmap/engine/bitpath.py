"""Prefix <-> quart path codec.

A quart is a 2-bit digit selecting one of the four children of a square on
the Hilbert curve. Each address byte holds four quarts, most significant
pair first. An odd mask length leaves one extra bit, which selects half of
the last square instead of a quarter.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from hilbertmap.engine.constants import BITS_PER_QUART, QUARTS_PER_BYTE
from hilbertmap.engine.prefix import Prefix

# Bit offsets of the four quarts inside a byte, left to right.
_QUART_SHIFTS = np.array([6, 4, 2, 0], dtype=np.uint8)


class QuartPath(NamedTuple):
    quarts: list[int]
    # None for even mask lengths (full square), else 0 or 1 (half rect)
    trailing_bit: int | None


def extract_digit(octets: Sequence[int], index: int) -> int | None:
    """Quart at logical position ``index``, or None if out of bounds."""
    if index < 0 or index >= len(octets) * QUARTS_PER_BYTE:
        return None
    byte_index, quart_in_byte = divmod(index, QUARTS_PER_BYTE)
    shift = (QUARTS_PER_BYTE - 1 - quart_in_byte) * BITS_PER_QUART
    return (octets[byte_index] >> shift) & 0b11


def address_to_quarts(octets: Sequence[int]) -> NDArray[np.uint8]:
    """Every quart of the address, in curve order."""
    raw = np.asarray(octets, dtype=np.uint8)
    return ((raw[:, None] >> _QUART_SHIFTS) & 0b11).ravel()


def prefix_to_path(prefix: Prefix, skip: int) -> QuartPath | None:
    """Quarts of ``prefix`` after the first ``skip`` ones, plus the odd trailing bit.

    Returns None when ``skip`` is negative or beyond the prefix's full
    quarts, or when the mask is longer than the address.
    """
    octets, mask_len = prefix.octets, prefix.mask_len
    full_quarts = mask_len // BITS_PER_QUART
    if skip < 0 or skip > full_quarts or mask_len > len(octets) * 8:
        return None

    quarts = address_to_quarts(octets)[skip:full_quarts].tolist()

    trailing_bit = None
    if mask_len % 2 == 1:
        # Higher bit of the quart that the mask only half covers
        trailing_bit = extract_digit(octets, full_quarts) >> 1

    return QuartPath(quarts=quarts, trailing_bit=trailing_bit)


def path_to_bytes(quarts: Sequence[int]) -> tuple[int, ...]:
    """Pack quarts four per byte, zero-padding the last byte."""
    n_bytes = -(-len(quarts) // QUARTS_PER_BYTE)
    digits = np.zeros(n_bytes * QUARTS_PER_BYTE, dtype=np.uint8)
    digits[: len(quarts)] = quarts
    packed = np.bitwise_or.reduce(
        digits.reshape(n_bytes, QUARTS_PER_BYTE) << _QUART_SHIFTS, axis=1
    )
    return tuple(int(b) for b in packed)
