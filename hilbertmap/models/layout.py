"""Declarative composite layouts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from hilbertmap.utils.notation import parse_prefix


class SubnetPlacement(BaseModel):
    subnet: str = Field(..., description="Subnet in CIDR notation, e.g. 2400::/12")
    grid_mask_len: int = Field(..., ge=0, description="Mask length of one grid cell")
    offset: tuple[int, int] = Field(default=(0, 0), description="Position of the subnet's grid in the composite")

    @field_validator("subnet")
    @classmethod
    def _check_subnet(cls, value: str) -> str:
        parse_prefix(value)
        return value


class CompositeLayout(BaseModel):
    width: int = Field(..., gt=0, description="Composite grid width in cells")
    height: int = Field(..., gt=0, description="Composite grid height in cells")
    children: list[SubnetPlacement] = Field(default_factory=list)
