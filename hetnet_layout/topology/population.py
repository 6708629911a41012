"""
Population sizing for the deployment.

Turns the femtocell deployment ratios and the macro UE density into integer
entity counts. Every count is rounded half away from zero.
"""

import math
import logging
from dataclasses import dataclass

from ..geometry.box import Box
from ..geometry.errors import InvalidAreaUsage

logger = logging.getLogger(__name__)

# Two apartment rows per block times two apartments per floor cross-section
APARTMENTS_PER_COLUMN_PAIR = 4

# Each macro site carries three sectors, one eNB each
SECTORS_PER_SITE = 3


@dataclass(frozen=True)
class PopulationCounts:
    """Entity counts derived for one deployment."""
    home_enbs: int
    home_ues: int
    macro_ues: int
    macro_enbs: int

    # Block parameters the femtocell counts were derived from
    apartments_per_row: int
    n_blocks: int
    n_floors: int

    def to_dict(self) -> dict:
        return {
            'home_enbs': self.home_enbs,
            'home_ues': self.home_ues,
            'macro_ues': self.macro_ues,
            'macro_enbs': self.macro_enbs,
            'apartments_per_row': self.apartments_per_row,
            'n_blocks': self.n_blocks,
            'n_floors': self.n_floors
        }


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def home_enb_count(apartments_per_row: int, n_blocks: int, n_floors: int,
                   deployment_ratio: float, activation_ratio: float) -> int:
    """Number of active femtocell eNBs (HeNBs) across all blocks."""
    n_apartments = APARTMENTS_PER_COLUMN_PAIR * apartments_per_row * n_blocks * n_floors
    return round_half_away(n_apartments * deployment_ratio * activation_ratio)


def home_ue_count(home_enbs: int, ues_per_home_enb: float) -> int:
    """Number of indoor UEs served by femtocells."""
    return round_half_away(home_enbs * ues_per_home_enb)


def macro_ue_count(area_width: float, area_height: float, density: float) -> int:
    """Number of outdoor UEs for a given area (m) and density (UEs per m^2)."""
    return round_half_away(area_width * area_height * density)


def macro_enb_count(n_sites: int) -> int:
    return SECTORS_PER_SITE * n_sites


def derive_population(config, area: Box) -> PopulationCounts:
    """
    Derive all entity counts for a deployment configuration.

    Args:
        config: DeploymentConfig with block and ratio parameters
        area: Deployment area the macro UEs are spread over

    Returns:
        PopulationCounts

    Raises:
        InvalidAreaUsage: If a count parameter is negative
    """
    for name in ('n_blocks', 'apartments_per_row', 'n_floors', 'n_macro_enb_sites'):
        if getattr(config, name) < 0:
            raise InvalidAreaUsage(f"{name} must not be negative, got {getattr(config, name)}")

    home_enbs = home_enb_count(
        config.apartments_per_row,
        config.n_blocks,
        config.n_floors,
        config.home_enb_deployment_ratio,
        config.home_enb_activation_ratio
    )
    home_ues = home_ue_count(home_enbs, config.home_ues_home_enb_ratio)
    macro_ues = macro_ue_count(area.width, area.height, config.macro_ue_density)

    logger.debug(f"home_enbs = {home_enbs}, home_ues = {home_ues}, "
                 f"macro_ues = {macro_ues} (density={config.macro_ue_density})")

    return PopulationCounts(
        home_enbs=home_enbs,
        home_ues=home_ues,
        macro_ues=macro_ues,
        macro_enbs=macro_enb_count(config.n_macro_enb_sites),
        apartments_per_row=config.apartments_per_row,
        n_blocks=config.n_blocks,
        n_floors=config.n_floors
    )
