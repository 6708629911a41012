"""
Visualization utilities for deployment layouts.

This module draws the deployment area, apartment blocks, buildings and
macro sites of a planned layout.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from pathlib import Path

from ..core.deployment import DeploymentLayout


class DeploymentVisualizer:
    """Plots DeploymentLayout objects."""

    def __init__(self, style: str = 'default'):
        try:
            plt.style.use(style)
        except OSError:
            # Fallback to default if style not available
            plt.style.use('default')

    def plot_layout(self, layout: DeploymentLayout, output_file: str) -> str:
        """Draw the layout and save it to output_file."""
        fig, ax = plt.subplots(figsize=(10, 10))

        area = layout.area
        ax.add_patch(Rectangle((area.x_min, area.y_min), area.width, area.height,
                               fill=False, linestyle='--', edgecolor='grey', label='Deployment area'))

        for i, block in enumerate(layout.blocks):
            ax.add_patch(Rectangle((block.x_min, block.y_min), block.width, block.height,
                                   fill=False, edgecolor='tab:blue',
                                   label='Apartment blocks' if i == 0 else None))

        for i, building in enumerate(layout.building_footprints()):
            ax.add_patch(Rectangle((building.x_min, building.y_min), building.width, building.height,
                                   facecolor='tab:orange', alpha=0.6,
                                   label='Buildings' if i == 0 else None))

        if layout.macro_ue_positions:
            ue_x = [pos[0] for pos in layout.macro_ue_positions]
            ue_y = [pos[1] for pos in layout.macro_ue_positions]
            ax.scatter(ue_x, ue_y, c='grey', s=10, alpha=0.6, label='Macro UEs')

        if layout.macro_sites:
            site_x = [pos[0] for pos in layout.macro_sites]
            site_y = [pos[1] for pos in layout.macro_sites]
            ax.scatter(site_x, site_y, c='red', s=200, marker='^', label='Macro sites', edgecolors='black')

            for i, (x, y) in enumerate(layout.macro_sites):
                ax.annotate(f'Site {i}', (x, y), xytext=(5, 5), textcoords='offset points')

        population = layout.population
        ax.set_title(f'Deployment Layout ({population.home_enbs} HeNBs, '
                     f'{population.home_ues} home UEs, {population.macro_ues} macro UEs)')
        ax.set_xlabel('X Position (m)')
        ax.set_ylabel('Y Position (m)')
        ax.set_xlim(area.x_min, area.x_max)
        ax.set_ylim(area.y_min, area.y_max)
        ax.set_aspect('equal')
        ax.legend(loc='upper right')
        ax.grid(True, alpha=0.3)

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        plt.tight_layout()
        plt.savefig(output_file, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return output_file
