"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from hilbertmap.engine.mapper import CompositeMapper, SubnetMapper
from hilbertmap.engine.region import Square
from hilbertmap.utils.notation import parse_prefix


# Regional registry blocks used for composite layouts
APNIC_V6 = "2400::/12"
RIPE_V6 = "2a00::/11"

# Default 16x16 reference square used by most curve cases
SQUARE_16 = Square(xc=8, yc=8, size=16, angle=0, flip=1)


def random_square(rng: np.random.Generator, max_order: int = 10) -> tuple[Square, int]:
    """Arbitrary start square: center not tied to size, any orientation."""
    order = int(rng.integers(1, max_order + 1))
    half = 2 ** (order - 1)
    square = Square(
        xc=int(rng.integers(-half, half + 1)),
        yc=int(rng.integers(-half, half + 1)),
        size=2**order,
        angle=int(rng.integers(0, 4)),
        flip=int(rng.choice([-1, 1])),
    )
    return square, order


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240607)


@pytest.fixture
def ipv4_mapper() -> SubnetMapper:
    return SubnetMapper(parse_prefix("0.0.0.0/0"), 8)


@pytest.fixture
def odd_mapper() -> SubnetMapper:
    return SubnetMapper(parse_prefix("192.0.0.0/3"), 8)


@pytest.fixture
def rir_composite() -> CompositeMapper:
    apnic = SubnetMapper(parse_prefix(APNIC_V6), 26)
    ripe = SubnetMapper(parse_prefix(RIPE_V6), 26)
    return CompositeMapper(256, 256, [(apnic, (0, 0)), (ripe, (128, 0))])
