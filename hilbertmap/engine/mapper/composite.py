"""Composite mapper: several child mappers placed side by side on one grid.

Useful for showing disjoint subnets together, e.g. the blocks of several
registries. Children are tried in list order and the first hit wins;
footprints are expected not to overlap, but that is not checked.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from hilbertmap.engine.mapper.base import HilbertMapper
from hilbertmap.engine.prefix import Prefix
from hilbertmap.engine.region import Rect


class MapperPlacement(NamedTuple):
    mapper: HilbertMapper
    offset: tuple[int, int]


class CompositeMapper(HilbertMapper):
    def __init__(
        self,
        width: int,
        height: int,
        children: Iterable[MapperPlacement | tuple[HilbertMapper, tuple[int, int]]],
    ) -> None:
        self._width = width
        self._height = height
        self._children = [
            MapperPlacement(mapper, (int(offset[0]), int(offset[1])))
            for mapper, offset in children
        ]

    @property
    def children(self) -> list[MapperPlacement]:
        return list(self._children)

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def grid_pos_to_prefix(self, x: int, y: int) -> Prefix | None:
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return None

        for mapper, (dx, dy) in self._children:
            prefix = mapper.grid_pos_to_prefix(x - dx, y - dy)
            if prefix is not None:
                return prefix
        return None

    def prefix_to_rect_region(self, prefix: Prefix) -> Rect | None:
        for mapper, (dx, dy) in self._children:
            rect = mapper.prefix_to_rect_region(prefix)
            if rect is not None:
                return rect.translate(dx, dy)
        return None

    def __repr__(self) -> str:
        return f"CompositeMapper({self._width}x{self._height}, {len(self._children)} children)"
