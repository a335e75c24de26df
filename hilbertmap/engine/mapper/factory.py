"""Build mappers from declarative layouts."""

from __future__ import annotations

import logging

from hilbertmap.engine.mapper.composite import CompositeMapper, MapperPlacement
from hilbertmap.engine.mapper.subnet import SubnetMapper
from hilbertmap.models.layout import CompositeLayout, SubnetPlacement
from hilbertmap.utils.notation import parse_prefix

logger = logging.getLogger(__name__)


def build_subnet_mapper(placement: SubnetPlacement) -> SubnetMapper:
    return SubnetMapper(parse_prefix(placement.subnet), placement.grid_mask_len)


def build_mapper(layout: CompositeLayout) -> CompositeMapper:
    """Create a CompositeMapper with one SubnetMapper per layout child, in order."""
    children = [
        MapperPlacement(build_subnet_mapper(child), child.offset)
        for child in layout.children
    ]
    logger.info(
        "Built %dx%d composite mapper with %d subnets",
        layout.width,
        layout.height,
        len(children),
    )
    return CompositeMapper(layout.width, layout.height, children)
