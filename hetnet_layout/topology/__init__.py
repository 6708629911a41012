"""
Topology sizing for HeNB deployments.

This module sizes the macro hex grid and derives population counts.
"""

from .hex_grid import rows_needed, site_positions, deployment_area, FALLBACK_AREA
from .population import PopulationCounts, derive_population, round_half_away

__all__ = ['rows_needed', 'site_positions', 'deployment_area', 'FALLBACK_AREA',
           'PopulationCounts', 'derive_population', 'round_half_away']
