"""Subnet mapper: lays one subnet out on an integer grid along the Hilbert curve.

Two coordinate systems are kept in sync:

* grid: what callers see, one unit per cell, origin at the subnet's
  minimum corner.
* internal: the reference square scaled x2, so the half-square rects of
  odd mask lengths still have integral corners.

The reference prefix is the subnet rounded down to an even mask length,
i.e. the smallest square on the curve that holds the whole subnet. Its
orientation is taken from the global curve so that a subnet looks the
same as it does inside a map of the full address space.
"""

from __future__ import annotations

import logging

from hilbertmap.engine.bitpath import path_to_bytes, prefix_to_path
from hilbertmap.engine.constants import MAX_GRID_SPAN, QUARTS_PER_BYTE, ROOT_SQUARE
from hilbertmap.engine.curve import descend_square, descend_to_rect, locate
from hilbertmap.engine.mapper.base import HilbertMapper
from hilbertmap.engine.prefix import Prefix, contains
from hilbertmap.engine.region import Rect, Square, point_in_rect

logger = logging.getLogger(__name__)


def _ref_square_internal(ref_quarts: list[int], grid_mask_len: int) -> Square:
    """Reference square in internal coordinates, oriented as on the global curve."""
    # Only angle and flip of the global square are used
    oriented = descend_square(ROOT_SQUARE, ref_quarts)
    order = grid_mask_len // 2 - len(ref_quarts)
    size = 2 ** (order + 1)
    return Square(xc=size // 2, yc=size // 2, size=size, angle=oriented.angle, flip=oriented.flip)


def _rect_in_ref_square(ref_square: Square, skip: int, prefix: Prefix) -> Rect:
    path = prefix_to_path(prefix, skip)
    return descend_to_rect(ref_square, path.quarts, path.trailing_bit)


class SubnetMapper(HilbertMapper):
    """Maps between grid cells and prefixes within one subnet.

    Each cell stands for one prefix of length ``grid_mask_len``. The grid
    is ``2^k x 2^k`` cells for even subnet mask lengths, or half that in
    one direction for odd ones.
    """

    def __init__(self, subnet_prefix: Prefix, grid_mask_len: int) -> None:
        self._subnet_prefix = subnet_prefix
        self._grid_mask_len = grid_mask_len
        self._validate()

        if subnet_prefix.mask_len % 2 == 0:
            self._ref_prefix = subnet_prefix
        else:
            self._ref_prefix = subnet_prefix.with_mask_len(subnet_prefix.mask_len - 1)

        self._ref_skip = self._ref_prefix.mask_len // 2
        self._ref_quarts = prefix_to_path(self._ref_prefix, 0).quarts
        self._ref_square = _ref_square_internal(self._ref_quarts, grid_mask_len)
        self._subnet_rect = _rect_in_ref_square(self._ref_square, self._ref_skip, subnet_prefix)

        logger.debug(
            "SubnetMapper /%d over %s: ref square %s, subnet rect %s",
            grid_mask_len,
            subnet_prefix,
            self._ref_square,
            self._subnet_rect,
        )

    def _validate(self) -> None:
        subnet_len = self._subnet_prefix.mask_len
        grid_len = self._grid_mask_len

        error = None
        if grid_len % 2:
            error = "grid mask length must be even, so that each cell is a square region"
        elif grid_len - subnet_len > MAX_GRID_SPAN:
            error = f"at most 2^{MAX_GRID_SPAN // 2} x 2^{MAX_GRID_SPAN // 2} cells can be shown"
        elif grid_len < subnet_len:
            error = "grid mask length too small, each cell would be larger than the subnet"
        elif grid_len > self._subnet_prefix.bit_length:
            error = "grid mask length exceeds the address width"

        if error is not None:
            logger.warning(
                "Rejected SubnetMapper(mask_len=%d, grid_mask_len=%d): %s",
                subnet_len,
                grid_len,
                error,
            )
            raise ValueError(f"SubnetMapper: {error}")

    @property
    def subnet_prefix(self) -> Prefix:
        return self._subnet_prefix

    @property
    def grid_mask_len(self) -> int:
        return self._grid_mask_len

    @property
    def ref_prefix(self) -> Prefix:
        return self._ref_prefix

    # -- coordinate conversion -------------------------------------------

    def _grid_to_internal_x(self, x: float) -> float:
        return x * 2 + self._subnet_rect.x

    def _grid_to_internal_y(self, y: float) -> float:
        return y * 2 + self._subnet_rect.y

    def _internal_to_grid_x(self, x_internal: float) -> int:
        return int((x_internal - self._subnet_rect.x) / 2)

    def _internal_to_grid_y(self, y_internal: float) -> int:
        return int((y_internal - self._subnet_rect.y) / 2)

    @staticmethod
    def _internal_to_grid_size(size_internal: float) -> int:
        return int(size_internal / 2)

    # -- HilbertMapper ---------------------------------------------------

    def get_width(self) -> int:
        return self._internal_to_grid_size(self._subnet_rect.width)

    def get_height(self) -> int:
        return self._internal_to_grid_size(self._subnet_rect.height)

    def grid_pos_to_prefix(self, x: int, y: int) -> Prefix | None:
        x_internal = self._grid_to_internal_x(x)
        y_internal = self._grid_to_internal_y(y)
        if not point_in_rect(x_internal, y_internal, self._subnet_rect):
            return None

        depth = self._grid_mask_len // 2 - self._ref_skip
        pos_quarts = locate(self._ref_square, x_internal, y_internal, depth)
        if pos_quarts is None:
            return None

        # Pad to the full address width so the cell keeps the subnet's byte length
        width_quarts = len(self._subnet_prefix.octets) * QUARTS_PER_BYTE
        quarts = self._ref_quarts + pos_quarts
        quarts += [0] * (width_quarts - len(quarts))

        return Prefix(path_to_bytes(quarts), self._grid_mask_len)

    def prefix_to_rect_region(self, prefix: Prefix) -> Rect | None:
        if not contains(self._subnet_prefix, prefix):
            return None

        # Anything finer than a cell resolves to its enclosing cell
        if prefix.mask_len > self._grid_mask_len:
            prefix = prefix.with_mask_len(self._grid_mask_len)

        rect = _rect_in_ref_square(self._ref_square, self._ref_skip, prefix)
        return Rect(
            x=self._internal_to_grid_x(rect.x),
            y=self._internal_to_grid_y(rect.y),
            width=self._internal_to_grid_size(rect.width),
            height=self._internal_to_grid_size(rect.height),
        )

    def __repr__(self) -> str:
        return (
            f"SubnetMapper(subnet_prefix={self._subnet_prefix!r}, "
            f"grid_mask_len={self._grid_mask_len})"
        )
