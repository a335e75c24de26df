"""Grid mappers: one subnet per mapper, or several composed on one grid."""

from hilbertmap.engine.mapper.base import HilbertMapper
from hilbertmap.engine.mapper.composite import CompositeMapper, MapperPlacement
from hilbertmap.engine.mapper.subnet import SubnetMapper

__all__ = ["CompositeMapper", "HilbertMapper", "MapperPlacement", "SubnetMapper"]
