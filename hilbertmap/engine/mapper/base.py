"""Common interface of all grid mappers."""

from __future__ import annotations

import abc

from hilbertmap.engine.prefix import Prefix
from hilbertmap.engine.region import Rect


class HilbertMapper(abc.ABC):
    """Maps integer grid positions to prefixes and prefixes to grid rects.

    Lookups outside the mapper's domain return None rather than raising.
    """

    @abc.abstractmethod
    def get_width(self) -> int:
        """Grid width in cells."""

    @abc.abstractmethod
    def get_height(self) -> int:
        """Grid height in cells."""

    @abc.abstractmethod
    def grid_pos_to_prefix(self, x: int, y: int) -> Prefix | None:
        """Prefix of the cell at (x, y), or None if off the grid."""

    @abc.abstractmethod
    def prefix_to_rect_region(self, prefix: Prefix) -> Rect | None:
        """Grid region covered by ``prefix``, or None if outside the mapper."""

    @property
    def width(self) -> int:
        return self.get_width()

    @property
    def height(self) -> int:
        return self.get_height()
