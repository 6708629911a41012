"""
Export of planned deployments.

Layouts can be written as JSON (everything), CSV (one row per block) or as
a gnuplot script fragment drawing every building footprint. eNBs and
macro UEs can be written as gnuplot labels.
"""

import json
import logging
from typing import List, Sequence, Tuple

import pandas as pd

from ..core.deployment import DeploymentLayout
from ..geometry.box import Box

logger = logging.getLogger(__name__)


class LayoutExporter:
    """Writes DeploymentLayout objects to files."""

    GNUPLOT_SUFFIXES = ('.gp', '.gnuplot', '.plt')

    def export(self, layout: DeploymentLayout, output_file: str):
        """Export a layout, choosing the format from the file suffix."""
        if output_file.endswith('.json'):
            self._export_json(layout, output_file)
        elif output_file.endswith('.csv'):
            self._export_csv(layout, output_file)
        elif output_file.endswith(self.GNUPLOT_SUFFIXES):
            self.export_gnuplot_buildings(layout.building_footprints(), output_file)
        else:
            raise ValueError(f"Unsupported file format: {output_file}")
        logger.info(f"Layout exported to {output_file}")

    def blocks_dataframe(self, layout: DeploymentLayout) -> pd.DataFrame:
        """One row per block with its bounds and building grid anchor."""
        rows = []
        for index, (block, spec) in enumerate(zip(layout.blocks, layout.buildings)):
            rows.append({
                'block_id': index,
                'x_min': block.x_min,
                'x_max': block.x_max,
                'y_min': block.y_min,
                'y_max': block.y_max,
                'building_min_x': spec.min_x,
                'building_min_y': spec.min_y,
                'building_height': spec.height
            })
        return pd.DataFrame(rows, columns=['block_id', 'x_min', 'x_max', 'y_min', 'y_max',
                                           'building_min_x', 'building_min_y', 'building_height'])

    def _export_json(self, layout: DeploymentLayout, filename: str):
        with open(filename, 'w') as f:
            json.dump(layout.to_dict(), f, indent=2, default=str)

    def _export_csv(self, layout: DeploymentLayout, filename: str):
        self.blocks_dataframe(layout).to_csv(filename, index=False)

    @staticmethod
    def gnuplot_rect_lines(boxes: List[Box]) -> List[str]:
        """gnuplot ``set object`` commands, numbered from 1."""
        return [
            f"set object {index} rect from {box.x_min:g},{box.y_min:g} "
            f"to {box.x_max:g},{box.y_max:g} front fs empty"
            for index, box in enumerate(boxes, start=1)
        ]

    def export_gnuplot_buildings(self, boxes: List[Box], filename: str):
        """Write one rectangle object per building."""
        with open(filename, 'w') as f:
            for line in self.gnuplot_rect_lines(boxes):
                f.write(line + "\n")

    @staticmethod
    def gnuplot_enb_label_lines(cells: List[Tuple[int, float, float]]) -> List[str]:
        """gnuplot ``set label`` commands marking each eNB with its cell id."""
        return [
            f'set label "{cell_id}" at {x:g},{y:g} left font "Helvetica,4" '
            f'textcolor rgb "white" front  point pt 2 ps 0.3 lc rgb "white" offset 0,0'
            for cell_id, x, y in cells
        ]

    @staticmethod
    def gnuplot_ue_label_lines(positions: List[Sequence[float]], first_id: int = 1) -> List[str]:
        """gnuplot ``set label`` commands marking each UE, numbered from first_id."""
        return [
            f'set label "{ue_id}" at {position[0]:g},{position[1]:g} left font "Helvetica,4" '
            f'textcolor rgb "grey" front point pt 1 ps 0.3 lc rgb "grey" offset 0,0'
            for ue_id, position in enumerate(positions, start=first_id)
        ]

    def export_gnuplot_enbs(self, layout: DeploymentLayout, filename: str):
        """Write one label per macro eNB."""
        with open(filename, 'w') as f:
            for line in self.gnuplot_enb_label_lines(layout.macro_enb_cells()):
                f.write(line + "\n")

    def export_gnuplot_ues(self, layout: DeploymentLayout, filename: str):
        """Write one label per macro UE."""
        with open(filename, 'w') as f:
            for line in self.gnuplot_ue_label_lines(layout.macro_ue_positions):
                f.write(line + "\n")
