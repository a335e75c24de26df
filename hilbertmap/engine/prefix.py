"""Network prefix value type and containment test. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """An address range: raw address bytes (most significant first) plus a mask length.

    The engine does not care whether ``octets`` holds an IPv4 (4 bytes) or
    IPv6 (16 bytes) address; any byte length works.
    """

    octets: Sequence[int]
    mask_len: int

    def __post_init__(self) -> None:
        # Accept lists, tuples or bytes; store a hashable tuple
        values = tuple(int(b) for b in self.octets)
        if any(b < 0 or b > 0xFF for b in values):
            raise ValueError(f"Prefix octets must be in 0..255, got {values}")
        if self.mask_len < 0 or self.mask_len > len(values) * 8:
            raise ValueError(
                f"Prefix mask length {self.mask_len} out of range for {len(values)} bytes"
            )
        object.__setattr__(self, "octets", values)

    @property
    def bit_length(self) -> int:
        return len(self.octets) * 8

    def with_mask_len(self, mask_len: int) -> Prefix:
        """Same address bytes, different mask length."""
        return Prefix(self.octets, mask_len)


def contains(parent: Prefix, child: Prefix) -> bool:
    """True if ``child`` lies inside ``parent`` (a prefix contains itself)."""
    if parent.mask_len > child.mask_len:
        return False

    whole, rest = divmod(parent.mask_len, 8)

    for i in range(whole):
        if parent.octets[i] != child.octets[i]:
            return False

    if rest:
        mask = 0x100 - (1 << (8 - rest))
        if (parent.octets[whole] & mask) != (child.octets[whole] & mask):
            return False

    return True
