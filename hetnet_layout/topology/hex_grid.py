"""
Hexagonal macro-site grid extent.

Macro sites are laid out in a staggered (brick-like) hexagonal grid made of
repeating bi-rows: the first row of a bi-row holds ``sites_per_row`` sites,
the second holds ``sites_per_row + 1`` and is shifted by half an inter-site
distance. This module sizes that grid and derives the deployment area
around it.
"""

import math
import logging
from typing import List, Optional, Tuple

from ..geometry.box import Box
from ..geometry.errors import InvalidAreaUsage

logger = logging.getLogger(__name__)

# Vertical distance between rows, as a fraction of the inter-site distance
ROW_SPACING_FACTOR = math.sqrt(0.75)

# UE height range used for the deployment area
UE_MIN_HEIGHT = 1.0  # m
UE_MAX_HEIGHT = 2.0  # m

# Area used when there are no macro sites; blocks still need somewhere to go
FALLBACK_AREA = Box(0.0, 150.0, 0.0, 150.0, UE_MIN_HEIGHT, UE_MAX_HEIGHT)


def _check_grid_args(total_sites: int, sites_per_row: int):
    if total_sites < 1:
        raise InvalidAreaUsage(f"Hex grid needs at least one site, got {total_sites}")
    if sites_per_row < 1:
        raise InvalidAreaUsage(f"Hex grid width must be positive, got {sites_per_row}")


def _grid_slot(site_index: int, sites_per_row: int) -> Tuple[int, int]:
    """Return (row, column) of a zero-based site index."""
    bi_row_size = 2 * sites_per_row + 1
    bi_row_index = site_index // bi_row_size
    bi_row_remainder = site_index % bi_row_size
    row = bi_row_index * 2
    column = bi_row_remainder
    if bi_row_remainder >= sites_per_row:
        column = bi_row_remainder - sites_per_row
        row += 1
    return row, column


def rows_needed(total_sites: int, sites_per_row: int) -> int:
    """
    Number of grid rows spanned by ``total_sites`` sites.

    Args:
        total_sites: Number of macro sites (at least 1)
        sites_per_row: Sites in the short row of each bi-row (at least 1)

    Returns:
        Row count, i.e. one past the row index of the last site

    Raises:
        InvalidAreaUsage: If total_sites or sites_per_row is below 1
    """
    _check_grid_args(total_sites, sites_per_row)
    last_row, _ = _grid_slot(total_sites - 1, sites_per_row)
    return last_row + 1


def site_positions(total_sites: int, sites_per_row: int, inter_site_distance: float,
                   min_x: Optional[float] = None, min_y: float = 0.0) -> List[Tuple[float, float]]:
    """
    Coordinates of every macro site in the staggered grid.

    Odd rows are shifted by half an inter-site distance towards negative X.
    ``min_x`` defaults to half an inter-site distance, which keeps the
    shifted rows at x >= 0.
    """
    _check_grid_args(total_sites, sites_per_row)
    if min_x is None:
        min_x = inter_site_distance / 2

    positions = []
    for site in range(total_sites):
        row, column = _grid_slot(site, sites_per_row)
        x = min_x + inter_site_distance * column
        if row % 2 == 1:
            x -= inter_site_distance / 2
        y = min_y + inter_site_distance * row * ROW_SPACING_FACTOR
        positions.append((x, y))
    return positions


def deployment_area(n_sites: int, sites_per_row: int, inter_site_distance: float,
                    margin_factor: float) -> Box:
    """
    Bounding box in which macro UEs and femtocell blocks are dropped.

    The box covers the macro grid and extends ``margin_factor`` inter-site
    distances beyond it on every side. With no macro sites the fixed
    FALLBACK_AREA is returned and the grid is not sized at all.
    """
    if n_sites == 0:
        logger.info(f"No macro sites configured, using fallback area {FALLBACK_AREA}")
        return FALLBACK_AREA

    n_rows = rows_needed(n_sites, sites_per_row)
    logger.debug(f"Hex grid of {n_sites} sites, {sites_per_row} per row spans {n_rows} rows")

    margin = margin_factor * inter_site_distance
    area = Box(
        -margin,
        (sites_per_row + margin_factor) * inter_site_distance,
        -margin,
        (n_rows - 1) * inter_site_distance * ROW_SPACING_FACTOR + margin,
        UE_MIN_HEIGHT,
        UE_MAX_HEIGHT
    )
    if not area.is_well_formed():
        raise InvalidAreaUsage(f"Derived deployment area is inverted: {area}")
    return area
