"""Tests for declarative layouts and the mapper factory."""

import pytest
from pydantic import ValidationError

from hilbertmap.engine.mapper import CompositeMapper, SubnetMapper
from hilbertmap.engine.mapper.factory import build_mapper, build_subnet_mapper
from hilbertmap.engine.region import Rect
from hilbertmap.models.layout import CompositeLayout, SubnetPlacement
from hilbertmap.utils.notation import parse_prefix
from tests.conftest import APNIC_V6, RIPE_V6

RIR_LAYOUT_JSON = """
{
  "width": 256,
  "height": 256,
  "children": [
    {"subnet": "2400::/12", "grid_mask_len": 26},
    {"subnet": "2a00::/11", "grid_mask_len": 26, "offset": [128, 0]}
  ]
}
"""


def test_layout_from_json():
    layout = CompositeLayout.model_validate_json(RIR_LAYOUT_JSON)
    assert layout.width == 256
    assert layout.children[0].offset == (0, 0)
    assert layout.children[1].offset == (128, 0)


def test_build_mapper_matches_manual_composite(rir_composite):
    mapper = build_mapper(CompositeLayout.model_validate_json(RIR_LAYOUT_JSON))
    assert isinstance(mapper, CompositeMapper)
    assert (mapper.get_width(), mapper.get_height()) == (256, 256)

    for cidr in (APNIC_V6, RIPE_V6, "2405:1234::/32", "2a08::/12", "2000::/3"):
        prefix = parse_prefix(cidr)
        assert mapper.prefix_to_rect_region(prefix) == rir_composite.prefix_to_rect_region(prefix)


def test_build_subnet_mapper():
    mapper = build_subnet_mapper(SubnetPlacement(subnet="192.0.0.0/3", grid_mask_len=8))
    assert isinstance(mapper, SubnetMapper)
    assert mapper.prefix_to_rect_region(parse_prefix("192.0.0.0/3")) == Rect(0, 0, 8, 4)


def test_layout_rejects_bad_subnet():
    with pytest.raises(ValidationError):
        SubnetPlacement(subnet="192.0.0.0/40", grid_mask_len=8)


@pytest.mark.parametrize("width, height", [(0, 16), (16, -1)])
def test_layout_rejects_empty_grid(width, height):
    with pytest.raises(ValidationError):
        CompositeLayout(width=width, height=height)


def test_build_mapper_propagates_construction_errors():
    layout = CompositeLayout(
        width=16,
        height=16,
        children=[SubnetPlacement(subnet="10.0.0.0/8", grid_mask_len=15)],
    )
    with pytest.raises(ValueError):
        build_mapper(layout)
