"""
Apartment buildings hosted by a femtocell block.

Each block holds a grid of two apartment buildings stacked along Y, with a
10 m buffer around them. The building generator itself lives outside this
package; BuildingGridSpec carries the parameters it is configured with.
"""

from dataclasses import dataclass
from typing import List

from ..geometry.box import Box

APARTMENT_WIDTH = 10.0  # m, along X
APARTMENT_DEPTH = 10.0  # m, along Y
FLOOR_HEIGHT = 3.0  # m
ROOMS_Y = 2
BUILDING_SPACING = 10.0  # m, between buildings and from the block edge
BUILDINGS_PER_BLOCK = 2
GRID_WIDTH = 1


def block_width(apartments_per_row: int) -> float:
    """Block extent along X: one row of apartments plus a buffer on both sides."""
    return APARTMENT_WIDTH * apartments_per_row + 2 * BUILDING_SPACING


def block_height() -> float:
    """Block extent along Y: two buildings, their gap and the buffer."""
    return (BUILDINGS_PER_BLOCK * APARTMENT_DEPTH * ROOMS_Y +
            (BUILDINGS_PER_BLOCK + 1) * BUILDING_SPACING)


@dataclass(frozen=True)
class BuildingGridSpec:
    """Grid building generator settings for one block."""
    min_x: float
    min_y: float
    length_x: float
    length_y: float
    delta_x: float
    delta_y: float
    height: float
    n_rooms_x: int
    n_rooms_y: int
    n_floors: int
    grid_width: int = GRID_WIDTH
    n_buildings: int = BUILDINGS_PER_BLOCK

    @classmethod
    def for_block(cls, block: Box, apartments_per_row: int, n_floors: int) -> 'BuildingGridSpec':
        """Anchor the building grid one spacing inside the block's lower-left corner."""
        return cls(
            min_x=block.x_min + BUILDING_SPACING,
            min_y=block.y_min + BUILDING_SPACING,
            length_x=APARTMENT_WIDTH * apartments_per_row,
            length_y=APARTMENT_DEPTH * ROOMS_Y,
            delta_x=BUILDING_SPACING,
            delta_y=BUILDING_SPACING,
            height=FLOOR_HEIGHT * n_floors,
            n_rooms_x=apartments_per_row,
            n_rooms_y=ROOMS_Y,
            n_floors=n_floors
        )

    def footprints(self) -> List[Box]:
        """
        Boundaries of the generated buildings.

        Buildings fill the grid row-first: with a grid width of 1 every
        building starts a new row.
        """
        boxes = []
        for index in range(self.n_buildings):
            row = index // self.grid_width
            column = index % self.grid_width
            x_min = self.min_x + column * (self.length_x + self.delta_x)
            y_min = self.min_y + row * (self.length_y + self.delta_y)
            boxes.append(Box(x_min, x_min + self.length_x,
                             y_min, y_min + self.length_y,
                             0.0, self.height))
        return boxes

    def to_dict(self) -> dict:
        return {
            'min_x': self.min_x,
            'min_y': self.min_y,
            'length_x': self.length_x,
            'length_y': self.length_y,
            'delta_x': self.delta_x,
            'delta_y': self.delta_y,
            'height': self.height,
            'n_rooms_x': self.n_rooms_x,
            'n_rooms_y': self.n_rooms_y,
            'n_floors': self.n_floors,
            'grid_width': self.grid_width,
            'n_buildings': self.n_buildings
        }
