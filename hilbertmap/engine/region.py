"""Leaf-node region types and helpers. No engine imports.

Coordinates follow the math convention: x grows right, y grows up.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Square:
    """An oriented square visited during curve recursion.

    ``angle`` is the rotation in quarter turns (0..3), ``flip`` the
    chirality (+1 or -1). Centers may be fractional once the square is
    smaller than the frame it started from.
    """

    xc: float
    yc: float
    size: float
    angle: int = 0
    flip: int = 1

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Square size must be positive, got {self.size}")
        if self.angle not in (0, 1, 2, 3):
            raise ValueError(f"Square angle must be 0..3, got {self.angle}")
        if self.flip not in (1, -1):
            raise ValueError(f"Square flip must be +1 or -1, got {self.flip}")


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its minimum corner and extent."""

    x: float
    y: float
    width: float
    height: float

    def translate(self, dx: float, dy: float) -> Rect:
        return Rect(x=self.x + dx, y=self.y + dy, width=self.width, height=self.height)


def square_to_rect(square: Square) -> Rect:
    """Bounding rect of a square, dropping its orientation."""
    half = square.size / 2
    return Rect(
        x=square.xc - half,
        y=square.yc - half,
        width=square.size,
        height=square.size,
    )


def point_in_square(x: float, y: float, square: Square) -> bool:
    """Half-open membership: min edges inside, max edges outside."""
    half = square.size / 2
    return (
        square.xc - half <= x < square.xc + half
        and square.yc - half <= y < square.yc + half
    )


def point_in_rect(x: float, y: float, rect: Rect) -> bool:
    """Half-open membership, same convention as :func:`point_in_square`."""
    return rect.x <= x < rect.x + rect.width and rect.y <= y < rect.y + rect.height
