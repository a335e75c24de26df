"""hilbertmap: map network prefixes onto Hilbert-curve grid regions and back."""

from __future__ import annotations

from hilbertmap.engine.mapper import CompositeMapper, HilbertMapper, MapperPlacement, SubnetMapper
from hilbertmap.engine.prefix import Prefix, contains
from hilbertmap.engine.region import Rect, Square

__version__ = "0.1.0"

__all__ = [
    "CompositeMapper",
    "HilbertMapper",
    "MapperPlacement",
    "Prefix",
    "Rect",
    "Square",
    "SubnetMapper",
    "contains",
]
