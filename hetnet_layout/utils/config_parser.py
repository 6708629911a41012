"""
Configuration Parser for the HeNB Deployment Generator

This module handles loading and validation of deployment configuration files.
"""

import copy
import json
import yaml
import jsonschema
import logging
from typing import Dict, Any, List
from pathlib import Path

from ..core.config import DeploymentConfig

logger = logging.getLogger(__name__)


class ConfigParser:
    """
    Configuration parser and validator for deployment parameters
    """

    # JSON Schema for configuration validation
    CONFIG_SCHEMA = {
        "type": "object",
        "properties": {
            "simulation": {
                "type": "object",
                "properties": {
                    "random_seed": {"type": ["integer", "null"]},
                    "log_level": {"type": "string", "enum": ["DEBUG", "INFO", "WARNING", "ERROR"]},
                    "output_directory": {"type": "string"},
                    "enable_plots": {"type": "boolean"}
                },
                "additionalProperties": False
            },
            "macro": {
                "type": "object",
                "properties": {
                    "n_sites": {"type": "integer", "minimum": 0},
                    "sites_per_row": {"type": "integer", "minimum": 1},
                    "inter_site_distance": {"type": "number", "exclusiveMinimum": 0},
                    "area_margin_factor": {"type": "number", "minimum": 0}
                },
                "required": ["n_sites"],
                "additionalProperties": False
            },
            "femtocells": {
                "type": "object",
                "properties": {
                    "n_blocks": {"type": "integer", "minimum": 0},
                    "apartments_per_row": {"type": "integer", "minimum": 1},
                    "n_floors": {"type": "integer", "minimum": 1},
                    "deployment_ratio": {"type": "number", "minimum": 0, "maximum": 1},
                    "activation_ratio": {"type": "number", "minimum": 0, "maximum": 1},
                    "home_ues_per_enb": {"type": "number", "minimum": 0}
                },
                "required": ["n_blocks"],
                "additionalProperties": False
            },
            "ue": {
                "type": "object",
                "properties": {
                    "macro_ue_density": {"type": "number", "minimum": 0}
                },
                "additionalProperties": False
            }
        },
        "required": ["macro", "femtocells"],
        "additionalProperties": False
    }

    @classmethod
    def load_config(cls, config_path: str) -> DeploymentConfig:
        """
        Load configuration from a JSON or YAML file

        Args:
            config_path: Path to configuration file

        Returns:
            DeploymentConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file suffix is not supported
            json.JSONDecodeError: If JSON is invalid
            yaml.YAMLError: If YAML is invalid
            jsonschema.ValidationError: If config doesn't match schema
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading configuration from {config_path}")

        suffix = config_file.suffix.lower()
        if suffix not in ('.json', '.yaml', '.yml'):
            raise ValueError(f"Unsupported configuration file format: {config_file.suffix}")

        try:
            with open(config_file, 'r') as f:
                if suffix == '.json':
                    config_data = json.load(f)
                else:
                    config_data = yaml.safe_load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file: {e}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in configuration file: {e}")
            raise

        cls.validate_config(config_data)

        logger.info("Configuration loaded and validated successfully")

        return cls._dict_to_config(config_data)

    @classmethod
    def validate_config(cls, config_data: Dict[str, Any]):
        """
        Validate configuration against schema

        Raises:
            jsonschema.ValidationError: If config is invalid
        """
        try:
            jsonschema.validate(config_data, cls.CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            logger.error(f"Configuration validation error: {e.message}")
            raise

    @classmethod
    def _dict_to_config(cls, config_data: Dict[str, Any]) -> DeploymentConfig:
        """Convert configuration dictionary to DeploymentConfig object"""
        defaults = DeploymentConfig()

        sim_config = config_data.get('simulation', {})
        macro_config = config_data.get('macro', {})
        femto_config = config_data.get('femtocells', {})
        ue_config = config_data.get('ue', {})

        return DeploymentConfig(
            # Run parameters
            random_seed=sim_config.get('random_seed', defaults.random_seed),
            log_level=sim_config.get('log_level', defaults.log_level),
            output_directory=sim_config.get('output_directory', defaults.output_directory),
            enable_plots=sim_config.get('enable_plots', defaults.enable_plots),

            # Macro grid parameters
            n_macro_enb_sites=macro_config.get('n_sites', defaults.n_macro_enb_sites),
            n_macro_enb_sites_x=macro_config.get('sites_per_row', defaults.n_macro_enb_sites_x),
            inter_site_distance=macro_config.get('inter_site_distance', defaults.inter_site_distance),
            area_margin_factor=macro_config.get('area_margin_factor', defaults.area_margin_factor),

            # Femtocell parameters
            n_blocks=femto_config.get('n_blocks', defaults.n_blocks),
            apartments_per_row=femto_config.get('apartments_per_row', defaults.apartments_per_row),
            n_floors=femto_config.get('n_floors', defaults.n_floors),
            home_enb_deployment_ratio=femto_config.get('deployment_ratio', defaults.home_enb_deployment_ratio),
            home_enb_activation_ratio=femto_config.get('activation_ratio', defaults.home_enb_activation_ratio),
            home_ues_home_enb_ratio=femto_config.get('home_ues_per_enb', defaults.home_ues_home_enb_ratio),

            # UE parameters
            macro_ue_density=ue_config.get('macro_ue_density', defaults.macro_ue_density)
        )

    @classmethod
    def config_to_dict(cls, config: DeploymentConfig) -> Dict[str, Any]:
        """Convert a DeploymentConfig back to the sectioned file layout"""
        return {
            "simulation": {
                "random_seed": config.random_seed,
                "log_level": config.log_level,
                "output_directory": config.output_directory,
                "enable_plots": config.enable_plots
            },
            "macro": {
                "n_sites": config.n_macro_enb_sites,
                "sites_per_row": config.n_macro_enb_sites_x,
                "inter_site_distance": config.inter_site_distance,
                "area_margin_factor": config.area_margin_factor
            },
            "femtocells": {
                "n_blocks": config.n_blocks,
                "apartments_per_row": config.apartments_per_row,
                "n_floors": config.n_floors,
                "deployment_ratio": config.home_enb_deployment_ratio,
                "activation_ratio": config.home_enb_activation_ratio,
                "home_ues_per_enb": config.home_ues_home_enb_ratio
            },
            "ue": {
                "macro_ue_density": config.macro_ue_density
            }
        }

    @classmethod
    def create_default_config(cls, output_path: str = "config_template.json",
                              scenario: str = "dual_stripe"):
        """
        Create a configuration file from a predefined scenario

        Args:
            output_path: Output file path (.json, .yaml or .yml)
            scenario: Name of a scenario from get_scenario_configs()
        """
        scenarios = cls.get_scenario_configs()
        if scenario not in scenarios:
            raise ValueError(f"Unknown scenario: {scenario}")
        config = scenarios[scenario]

        config_path = Path(output_path)
        try:
            with open(config_path, 'w') as f:
                if config_path.suffix.lower() in ['.yaml', '.yml']:
                    yaml.dump(config, f, default_flow_style=False, indent=2)
                else:
                    json.dump(config, f, indent=2)
            logger.info(f"Default configuration template created: {output_path}")
        except IOError as e:
            logger.error(f"Failed to create configuration template: {e}")
            raise

    @classmethod
    def validate_config_file(cls, config_path: str) -> bool:
        """
        Validate configuration file without keeping the result

        Returns:
            True if valid, False otherwise
        """
        try:
            cls.load_config(config_path)
            return True
        except (OSError, ValueError, yaml.YAMLError, jsonschema.ValidationError) as e:
            logger.error(f"Configuration validation failed: {e}")
            return False

    @classmethod
    def merge_configs(cls, base_config: Dict[str, Any],
                      override_config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge two sectioned configuration dictionaries; override wins"""
        merged = copy.deepcopy(base_config)
        for section, values in override_config.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = copy.deepcopy(values)
        return merged

    @classmethod
    def get_available_scenarios(cls) -> List[str]:
        """Get list of available predefined scenarios."""
        return list(cls.get_scenario_configs().keys())

    @classmethod
    def get_scenario_configs(cls) -> Dict[str, Dict]:
        """Get predefined scenario configurations"""

        scenarios = {
            "dual_stripe": {
                "simulation": {
                    "random_seed": 42,
                    "log_level": "INFO",
                    "output_directory": "results/dual_stripe",
                    "enable_plots": True
                },
                "macro": {
                    "n_sites": 1,
                    "sites_per_row": 1,
                    "inter_site_distance": 500.0,
                    "area_margin_factor": 0.5
                },
                "femtocells": {
                    "n_blocks": 10,
                    "apartments_per_row": 5,
                    "n_floors": 1,
                    "deployment_ratio": 0.1,
                    "activation_ratio": 0.1,
                    "home_ues_per_enb": 1.0
                },
                "ue": {
                    "macro_ue_density": 0.000001
                }
            },

            "femto_only": {
                "simulation": {
                    "random_seed": 7,
                    "log_level": "INFO",
                    "output_directory": "results/femto_only",
                    "enable_plots": True
                },
                "macro": {
                    "n_sites": 0
                },
                "femtocells": {
                    "n_blocks": 1,
                    "apartments_per_row": 5,
                    "n_floors": 2,
                    "deployment_ratio": 0.5,
                    "activation_ratio": 0.5,
                    "home_ues_per_enb": 2.0
                },
                "ue": {
                    "macro_ue_density": 0.0001
                }
            },

            "urban_hexgrid": {
                "simulation": {
                    "random_seed": 123,
                    "log_level": "INFO",
                    "output_directory": "results/urban_hexgrid",
                    "enable_plots": True
                },
                "macro": {
                    "n_sites": 7,
                    "sites_per_row": 2,
                    "inter_site_distance": 500.0,
                    "area_margin_factor": 0.5
                },
                "femtocells": {
                    "n_blocks": 25,
                    "apartments_per_row": 10,
                    "n_floors": 6,
                    "deployment_ratio": 0.2,
                    "activation_ratio": 0.5,
                    "home_ues_per_enb": 1.0
                },
                "ue": {
                    "macro_ue_density": 0.00002
                }
            }
        }

        return scenarios
