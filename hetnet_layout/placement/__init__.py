"""
Femtocell block placement.

This module places apartment blocks and describes the buildings they host.
"""

from .block_allocator import FemtocellBlockAllocator, PlacementOutcome, MAX_PLACEMENT_ATTEMPTS
from .buildings import BuildingGridSpec, block_width, block_height

__all__ = ['FemtocellBlockAllocator', 'PlacementOutcome', 'MAX_PLACEMENT_ATTEMPTS',
           'BuildingGridSpec', 'block_width', 'block_height']
