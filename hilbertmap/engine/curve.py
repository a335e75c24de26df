"""Hilbert curve geometry: square subdivision and its depth-bounded inverse.

One recursion step picks a child of a square by quart. The child is a
quarter of the parent, rotated and reflected so that the curve keeps its
winding direction at every scale: neighbouring quarts are always
neighbouring squares, and each child's exit meets the next child's entry.

All functions return new values; squares are never mutated.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce

from hilbertmap.engine.region import Rect, Square, point_in_square, square_to_rect

# Orientation unit vector, by angle
_COS = (1, 0, -1, 0)
_SIN = (0, 1, 0, -1)

# Child center displacement in the square's own frame, by quart
_DX = (-1, -1, 1, 1)
_DY = (-1, 1, 1, -1)

# Child rotation and chirality change, by quart
_DANGLE = (-1, 0, 0, 1)
_DFLIP = (-1, 1, 1, -1)


def child_square(square: Square, quart: int) -> Square:
    """The child of ``square`` selected by ``quart`` (0..3)."""
    ox, oy = _COS[square.angle], _SIN[square.angle]
    dx, dy = _DX[quart], _DY[quart]
    step = square.size / 4

    return Square(
        xc=square.xc + step * (dx * square.flip * ox - dy * oy),
        yc=square.yc + step * (dx * square.flip * oy + dy * ox),
        size=square.size / 2,
        angle=(square.angle + _DANGLE[quart] * square.flip) % 4,
        flip=square.flip * _DFLIP[quart],
    )


def half_rect(square: Square, bit: int) -> Rect:
    """One of the two halves of ``square`` along the curve, selected by ``bit``.

    Even angles split the width, odd angles split the height.
    """
    ox, oy = _COS[square.angle], _SIN[square.angle]
    direction = 1 if bit else -1
    step = square.size / 4

    xc = square.xc + step * direction * square.flip * ox
    yc = square.yc + step * direction * square.flip * oy

    if square.angle % 2 == 0:
        width, height = square.size / 2, square.size
    else:
        width, height = square.size, square.size / 2

    return Rect(x=xc - width / 2, y=yc - height / 2, width=width, height=height)


def descend_square(square: Square, quarts: Sequence[int]) -> Square:
    """Follow ``quarts`` down from ``square``, one child per quart."""
    return reduce(child_square, quarts, square)


def descend_to_rect(
    square: Square,
    quarts: Sequence[int],
    trailing_bit: int | None = None,
) -> Rect:
    """Region reached by ``quarts``; a trailing bit selects half of the last square."""
    descendant = descend_square(square, quarts)
    if trailing_bit is None:
        return square_to_rect(descendant)
    return half_rect(descendant, trailing_bit)


def locate(square: Square, x: float, y: float, depth: int) -> list[int] | None:
    """Quart path of length ``depth`` leading to the square that holds (x, y).

    Exhaustive search over children in quart order. Returns None if the
    point is outside ``square``.
    """
    if not point_in_square(x, y, square):
        return None
    if depth == 0:
        return []

    for quart in range(4):
        path = locate(child_square(square, quart), x, y, depth - 1)
        if path is not None:
            return [quart, *path]

    return None
