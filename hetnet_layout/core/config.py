"""
Configuration classes for the deployment generator
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class DeploymentConfig:
    """Configuration parameters for a macro + femtocell deployment"""
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    output_directory: str = "results"
    enable_plots: bool = True

    # Macro grid configuration
    n_macro_enb_sites: int = 1
    n_macro_enb_sites_x: int = 1  # (minimum) number of sites along the X-axis
    inter_site_distance: float = 500.0  # meters
    area_margin_factor: float = 0.5  # fraction of inter_site_distance

    # Femtocell block configuration
    n_blocks: int = 10
    apartments_per_row: int = 5
    n_floors: int = 1
    home_enb_deployment_ratio: float = 0.1  # 3GPP R4-092042
    home_enb_activation_ratio: float = 0.1  # 3GPP R4-092042
    home_ues_home_enb_ratio: float = 1.0

    # UE configuration
    macro_ue_density: float = 0.000001  # UEs per square meter
