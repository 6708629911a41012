#!/usr/bin/env python3
"""
Basic HeNB Deployment Example

This script demonstrates sizing a macro grid, placing femtocell blocks and
deriving population counts with the deployment geometry generator.
"""

import sys
import os
import logging

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hetnet_layout.core.config import DeploymentConfig
from hetnet_layout.core.deployment import DeploymentPlanner
from hetnet_layout.placement.block_allocator import FemtocellBlockAllocator
from hetnet_layout.topology.hex_grid import rows_needed


def main():
    """Run basic deployment example"""

    # Setup logging
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    logger.info("Starting basic deployment example")

    # Create configuration
    config = DeploymentConfig(
        random_seed=42,
        n_macro_enb_sites=7,
        n_macro_enb_sites_x=2,
        inter_site_distance=500.0,
        n_blocks=15,
        apartments_per_row=8,
        n_floors=3,
        macro_ue_density=0.00002
    )

    print(f"Hex grid rows: {rows_needed(config.n_macro_enb_sites, config.n_macro_enb_sites_x)}")

    layout = DeploymentPlanner(config).plan()

    print(f"Deployment area: {layout.area}")
    for i, block in enumerate(layout.blocks):
        print(f"  Block {i}: {block}")

    population = layout.population
    print(f"HeNBs: {population.home_enbs}")
    print(f"Home UEs: {population.home_ues}")
    print(f"Macro UEs: {population.macro_ues}")

    # The allocator can also be driven directly, with a typed outcome
    allocator = FemtocellBlockAllocator(layout.area, config.apartments_per_row,
                                        config.n_floors, seed=1)
    outcome = allocator.try_place_one()
    print(f"Single block placed after {outcome.attempts} attempt(s): {outcome.block}")


if __name__ == "__main__":
    main()
