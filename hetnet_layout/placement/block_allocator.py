"""
Femtocell apartment block placement.

Blocks are dropped uniformly at random inside the deployment area and
rejected when they overlap (or touch) a block placed earlier. A block that
cannot be placed within MAX_PLACEMENT_ATTEMPTS draws means the area is too
small for the requested number of blocks.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..geometry.box import Box, boxes_overlap, require_well_formed
from ..geometry.errors import ConfigurationTooDense, InvalidAreaUsage
from .buildings import BuildingGridSpec, block_width, block_height

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 100


@dataclass(frozen=True)
class PlacementOutcome:
    """Result of one placement try; block is None when every attempt overlapped."""
    block: Optional[Box]
    attempts: int

    @property
    def success(self) -> bool:
        return self.block is not None


class FemtocellBlockAllocator:
    """
    Places non-overlapping apartment blocks inside an area.

    The random source only needs a ``uniform(low, high)`` method, so a
    ``numpy.random.Generator`` or a scripted stand-in can be injected.
    Each allocator keeps its own source and its own placement history.
    """

    def __init__(self, area: Box, apartments_per_row: int, n_floors: int,
                 rng=None, seed: Optional[int] = None,
                 max_attempts: int = MAX_PLACEMENT_ATTEMPTS):
        require_well_formed(area, "placement area")
        if apartments_per_row < 1:
            raise InvalidAreaUsage(f"apartments_per_row must be positive, got {apartments_per_row}")
        if max_attempts < 1:
            raise InvalidAreaUsage(f"max_attempts must be positive, got {max_attempts}")

        self.area = area
        self.apartments_per_row = apartments_per_row
        self.n_floors = n_floors
        self.block_width = block_width(apartments_per_row)
        self.block_height = block_height()
        self.max_attempts = max_attempts

        if area.width < self.block_width or area.height < self.block_height:
            raise InvalidAreaUsage(
                f"Area {area.width:g} x {area.height:g} m cannot hold a single "
                f"{self.block_width:g} x {self.block_height:g} m block"
            )

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._x_range: Tuple[float, float] = (area.x_min, area.x_max - self.block_width)
        self._y_range: Tuple[float, float] = (area.y_min, area.y_max - self.block_height)
        self._placed: List[Box] = []

    @property
    def blocks(self) -> Tuple[Box, ...]:
        """Blocks placed so far, in placement order."""
        return tuple(self._placed)

    def _draw_candidate(self) -> Box:
        x_min = float(self.rng.uniform(*self._x_range))
        y_min = float(self.rng.uniform(*self._y_range))
        return Box(x_min, x_min + self.block_width,
                   y_min, y_min + self.block_height,
                   0.0, 0.0)

    def overlaps_with_any_previous(self, box: Box) -> bool:
        """Check a candidate against every block placed so far."""
        for previous in self._placed:
            if boxes_overlap(previous, box):
                return True
        return False

    def try_place_one(self) -> PlacementOutcome:
        """
        Try to place one block without raising.

        Returns:
            PlacementOutcome with the accepted block, or with block=None after
            max_attempts overlapping candidates. The history only grows on
            success.
        """
        for attempt in range(1, self.max_attempts + 1):
            candidate = self._draw_candidate()
            if not self.overlaps_with_any_previous(candidate):
                self._placed.append(candidate)
                logger.debug(f"allocated non overlapping block {candidate} "
                             f"after {attempt} attempt(s)")
                return PlacementOutcome(candidate, attempt)

        logger.warning(f"No free spot for block {len(self._placed) + 1} "
                       f"after {self.max_attempts} attempts in {self.area}")
        return PlacementOutcome(None, self.max_attempts)

    def place_one(self, n_requested: Optional[int] = None) -> Box:
        """
        Place one block.

        Raises:
            ConfigurationTooDense: If every attempt overlapped a previous block
        """
        outcome = self.try_place_one()
        if not outcome.success:
            raise ConfigurationTooDense(self.area, len(self._placed), outcome.attempts,
                                        n_requested=n_requested)
        return outcome.block

    def place_many(self, n: int) -> List[Box]:
        """
        Place n blocks one after another.

        Each block is tested against all blocks placed before it, including
        those from earlier calls.

        Returns:
            The n new blocks in placement order
        """
        if n < 0:
            raise InvalidAreaUsage(f"Number of blocks must not be negative, got {n}")

        n_requested = len(self._placed) + n
        new_blocks = [self.place_one(n_requested=n_requested) for _ in range(n)]
        logger.info(f"Placed {n} femtocell block(s) in {self.area}")
        return new_blocks

    def building_specs(self) -> List[BuildingGridSpec]:
        """Building generator settings for every placed block."""
        return [BuildingGridSpec.for_block(block, self.apartments_per_row, self.n_floors)
                for block in self._placed]
