"""
Deployment planning for macro + femtocell scenarios.

This module wires the topology and placement components together: it sizes
the deployment area, drops the apartment blocks and derives the population
counts handed to the scenario builder.
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..geometry.box import Box
from ..placement.block_allocator import FemtocellBlockAllocator
from ..placement.buildings import BuildingGridSpec
from ..topology.hex_grid import deployment_area, site_positions
from ..topology.population import PopulationCounts, SECTORS_PER_SITE, derive_population
from .config import DeploymentConfig

logger = logging.getLogger(__name__)


@dataclass
class DeploymentLayout:
    """Container for one planned deployment."""
    area: Box
    blocks: List[Box]
    buildings: List[BuildingGridSpec]
    population: PopulationCounts
    macro_sites: List[Tuple[float, float]] = field(default_factory=list)
    macro_ue_positions: List[Tuple[float, float, float]] = field(default_factory=list)
    planning_time: float = 0.0
    config: Optional[DeploymentConfig] = None

    def building_footprints(self) -> List[Box]:
        """Every building of every block, in block order."""
        return [box for spec in self.buildings for box in spec.footprints()]

    def macro_enb_cells(self) -> List[Tuple[int, float, float]]:
        """(cell_id, x, y) of every macro eNB; the sectors of a site share its position."""
        cells = []
        for site, (x, y) in enumerate(self.macro_sites):
            for sector in range(SECTORS_PER_SITE):
                cells.append((site * SECTORS_PER_SITE + sector + 1, x, y))
        return cells

    def to_dict(self) -> Dict[str, Any]:
        return {
            'area': self.area.to_dict(),
            'blocks': [block.to_dict() for block in self.blocks],
            'buildings': [spec.to_dict() for spec in self.buildings],
            'population': self.population.to_dict(),
            'macro_sites': [list(position) for position in self.macro_sites],
            'macro_ue_positions': [list(position) for position in self.macro_ue_positions],
            'planning_time': self.planning_time
        }


class DeploymentPlanner:
    """Plans the geometry and population of a deployment."""

    def __init__(self, config: DeploymentConfig, rng=None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)

    def compute_area(self) -> Box:
        """Deployment area around the macro grid, or the fallback area."""
        return deployment_area(
            self.config.n_macro_enb_sites,
            self.config.n_macro_enb_sites_x,
            self.config.inter_site_distance,
            self.config.area_margin_factor
        )

    def compute_sites(self) -> List[Tuple[float, float]]:
        if self.config.n_macro_enb_sites == 0:
            return []
        return site_positions(
            self.config.n_macro_enb_sites,
            self.config.n_macro_enb_sites_x,
            self.config.inter_site_distance
        )

    def place_macro_ues(self, area: Box, n_ues: int) -> List[Tuple[float, float, float]]:
        """Drop n_ues outdoor UEs uniformly inside the area, height included."""
        positions = []
        for _ in range(n_ues):
            x = float(self.rng.uniform(area.x_min, area.x_max))
            y = float(self.rng.uniform(area.y_min, area.y_max))
            z = float(self.rng.uniform(area.z_min, area.z_max))
            positions.append((x, y, z))
        logger.debug(f"randomly allocated {n_ues} macro UEs in {area}")
        return positions

    def plan(self) -> DeploymentLayout:
        """
        Plan the full deployment.

        Returns:
            DeploymentLayout with area, blocks, buildings, population and macro UE positions

        Raises:
            InvalidAreaUsage: If the area is unusable for the configured blocks
            ConfigurationTooDense: If the blocks do not fit in the area
        """
        start_time = time.time()
        config = self.config

        area = self.compute_area()
        logger.info(f"Deployment area {area} ({area.area:.0f} m^2)")

        allocator = FemtocellBlockAllocator(
            area, config.apartments_per_row, config.n_floors, rng=self.rng
        )
        blocks = allocator.place_many(config.n_blocks)
        population = derive_population(config, area)

        layout = DeploymentLayout(
            area=area,
            blocks=blocks,
            buildings=allocator.building_specs(),
            population=population,
            macro_sites=self.compute_sites(),
            macro_ue_positions=self.place_macro_ues(area, population.macro_ues),
            planning_time=time.time() - start_time,
            config=config
        )

        logger.info(f"Femto's: {population.home_enbs}, inside UE's: {population.home_ues}, "
                    f"outside UE's: {population.macro_ues}, macro eNB's: {population.macro_enbs}")
        return layout
