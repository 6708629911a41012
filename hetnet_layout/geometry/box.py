"""
Axis-aligned bounding boxes.

Boxes describe deployment areas, apartment blocks and building footprints.
Only the X/Y extent takes part in overlap tests; the Z range is carried
along for consumers that place nodes at a height (UEs, eNBs).
"""

from dataclasses import dataclass

from .errors import InvalidAreaUsage


@dataclass(frozen=True)
class Box:
    """Axis-aligned 3D box. Bounds are stored as given, without checks."""
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    z_min: float = 0.0
    z_max: float = 0.0

    @property
    def width(self) -> float:
        """Extent along X."""
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        """Extent along Y."""
        return self.y_max - self.y_min

    @property
    def area(self) -> float:
        """Footprint in square meters."""
        return self.width * self.height

    def is_well_formed(self) -> bool:
        return self.x_min <= self.x_max and self.y_min <= self.y_max

    def overlaps(self, other: 'Box') -> bool:
        """
        Check whether two boxes overlap on the X/Y plane.

        Boxes that only touch along an edge or a corner count as overlapping,
        so accepted blocks never share a boundary.
        """
        return not (self.x_min > other.x_max or other.x_min > self.x_max or
                    self.y_min > other.y_max or other.y_min > self.y_max)

    def contains(self, other: 'Box') -> bool:
        """Check whether other lies inside this box on the X/Y plane (inclusive)."""
        return (self.x_min <= other.x_min and other.x_max <= self.x_max and
                self.y_min <= other.y_min and other.y_max <= self.y_max)

    def to_dict(self) -> dict:
        return {
            'x_min': self.x_min, 'x_max': self.x_max,
            'y_min': self.y_min, 'y_max': self.y_max,
            'z_min': self.z_min, 'z_max': self.z_max
        }

    def __str__(self) -> str:
        return (f"[{self.x_min:g}, {self.x_max:g}] x [{self.y_min:g}, {self.y_max:g}]"
                f" x [{self.z_min:g}, {self.z_max:g}]")


def boxes_overlap(a: Box, b: Box) -> bool:
    """Free-function form of Box.overlaps."""
    return a.overlaps(b)


def require_well_formed(box: Box, name: str = "box") -> Box:
    """
    Reject boxes with inverted bounds.

    Raises:
        InvalidAreaUsage: If x_min > x_max or y_min > y_max
    """
    if not box.is_well_formed():
        raise InvalidAreaUsage(f"{name} has inverted bounds: {box}")
    return box
