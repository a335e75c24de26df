"""Shared engine constants.

The root square is the unit frame every prefix path starts from. Only its
orientation matters to the mappers; position and size are rebuilt per grid.
"""

from hilbertmap.engine.region import Square

# Two bits of address per curve level.
BITS_PER_QUART = 2
QUARTS_PER_BYTE = 8 // BITS_PER_QUART

# Canonical starting frame: centered at (1, 1), side 2, no rotation or flip.
ROOT_SQUARE = Square(xc=1, yc=1, size=2, angle=0, flip=1)

# Max mask-length difference between a subnet and one grid cell.
# 32 bits = 2^16 x 2^16 cells, keeps internal coordinates exact in floats.
MAX_GRID_SPAN = 32
