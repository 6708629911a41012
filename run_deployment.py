#!/usr/bin/env python3
"""
Main runner for the HeNB Deployment Geometry Generator.

This script sizes the macro grid, places the femtocell apartment blocks and
derives population counts for a configured scenario, then exports the layout.

Usage:
    python run_deployment.py --config scenarios/dual_stripe.json
    python run_deployment.py --scenario urban_hexgrid --output layout.json
    python run_deployment.py --help
"""

import argparse
import logging
import os
import sys
import traceback
from pathlib import Path

from hetnet_layout.core.deployment import DeploymentPlanner
from hetnet_layout.geometry.errors import DeploymentError
from hetnet_layout.utils.config_parser import ConfigParser
from hetnet_layout.utils.export import LayoutExporter
from hetnet_layout.utils.visualization import DeploymentVisualizer

SCENARIOS = ConfigParser.get_available_scenarios()


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='HeNB Deployment Geometry Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --config scenarios/dual_stripe.json
  %(prog)s --scenario femto_only
  %(prog)s --scenario urban_hexgrid --output layout.csv --gnuplot buildings.gp
  %(prog)s --scenario dual_stripe --gnuplot-enbs enbs.txt --gnuplot-ues ues.txt
  %(prog)s --create-scenario dual_stripe --config-output scenarios/my_scenario.yaml
        """
    )

    # Main execution modes
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--config', '-c', type=str,
                       help='Configuration file path (JSON or YAML)')
    group.add_argument('--scenario', '-s', type=str, choices=SCENARIOS,
                       help='Use predefined scenario')
    group.add_argument('--create-scenario', type=str, choices=SCENARIOS,
                       help='Create a new scenario configuration file')

    # Optional parameters
    parser.add_argument('--output', '-o', type=str,
                        help='Output file for the layout (.json or .csv)')
    parser.add_argument('--results-dir', type=str,
                        help='Directory for results (overrides config)')
    parser.add_argument('--config-output', type=str,
                        help='Output path for created scenario (used with --create-scenario)')
    parser.add_argument('--seed', type=int,
                        help='Random seed for block placement (overrides config)')
    parser.add_argument('--gnuplot', type=str,
                        help='Write building rectangles as a gnuplot script to this file')
    parser.add_argument('--gnuplot-enbs', type=str,
                        help='Write macro eNB labels as a gnuplot script to this file')
    parser.add_argument('--gnuplot-ues', type=str,
                        help='Write macro UE labels as a gnuplot script to this file')
    parser.add_argument('--no-visualization', action='store_true',
                        help='Disable layout plot')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose output')

    return parser.parse_args(argv)


def setup_logging(level: str, verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )


def apply_overrides(config, args):
    """Return a copy of config with the command line overrides applied."""
    overrides = {}
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.results_dir:
        overrides["output_directory"] = args.results_dir
    if not overrides:
        return config

    config_data = ConfigParser.merge_configs(ConfigParser.config_to_dict(config),
                                             {"simulation": overrides})
    ConfigParser.validate_config(config_data)
    return ConfigParser._dict_to_config(config_data)


def plan_and_export(config, args) -> bool:
    """Plan the layout for config and write the requested outputs."""
    config = apply_overrides(config, args)
    results_dir = config.output_directory
    Path(results_dir).mkdir(parents=True, exist_ok=True)

    try:
        layout = DeploymentPlanner(config).plan()
    except DeploymentError as e:
        print(f"Deployment sizing error: {e}")
        if args.verbose:
            traceback.print_exc()
        return False

    population = layout.population
    print(f"Deployment area: {layout.area}")
    print(f"Blocks placed: {len(layout.blocks)}")
    print(f"Femto's: {population.home_enbs}")
    print(f"Inside UE's: {population.home_ues}")
    print(f"Outside UE's: {population.macro_ues}")
    print(f"Macro Enb's: {population.macro_enbs}")

    exporter = LayoutExporter()
    output_file = args.output or "layout.json"
    output_path = os.path.join(results_dir, os.path.basename(output_file))
    exporter.export(layout, output_path)
    print(f"Layout saved to: {output_path}")

    if args.gnuplot:
        gnuplot_path = os.path.join(results_dir, os.path.basename(args.gnuplot))
        exporter.export_gnuplot_buildings(layout.building_footprints(), gnuplot_path)
        print(f"Building list saved to: {gnuplot_path}")

    if args.gnuplot_enbs:
        enbs_path = os.path.join(results_dir, os.path.basename(args.gnuplot_enbs))
        exporter.export_gnuplot_enbs(layout, enbs_path)
        print(f"eNB list saved to: {enbs_path}")

    if args.gnuplot_ues:
        ues_path = os.path.join(results_dir, os.path.basename(args.gnuplot_ues))
        exporter.export_gnuplot_ues(layout, ues_path)
        print(f"UE list saved to: {ues_path}")

    if config.enable_plots and not args.no_visualization:
        plot_path = os.path.join(results_dir, "deployment_layout.png")
        try:
            DeploymentVisualizer().plot_layout(layout, plot_path)
            print(f"Layout plot saved to: {plot_path}")
        except (OSError, ValueError) as e:
            print(f"Warning: Error generating visualization: {e}")
            if args.verbose:
                traceback.print_exc()

    return True


def run_from_config(config_file: str, args) -> bool:
    """Plan a deployment from a configuration file."""
    print(f"Loading configuration from: {config_file}")

    try:
        config = ConfigParser.load_config(config_file)
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return False

    setup_logging(config.log_level, args.verbose)
    return plan_and_export(config, args)


def run_from_scenario(scenario: str, args) -> bool:
    """Plan a deployment from a predefined scenario."""
    print(f"Using predefined scenario: {scenario}")
    config_data = ConfigParser.get_scenario_configs()[scenario]
    config = ConfigParser._dict_to_config(config_data)

    setup_logging(config.log_level, args.verbose)
    return plan_and_export(config, args)


def create_scenario_config(scenario: str, args) -> bool:
    """Create a new scenario configuration file."""
    output_file = args.config_output or f"scenarios/{scenario}.json"
    Path(output_file).parent.mkdir(parents=True, exist_ok=True)

    print(f"Creating {scenario} scenario configuration...")

    try:
        ConfigParser.create_default_config(output_file, scenario)
        print(f"Configuration created: {output_file}")
        print("You can now modify this file and run it with:")
        print(f"  python run_deployment.py --config {output_file}")
        return True
    except (OSError, ValueError) as e:
        print(f"Error creating configuration: {e}")
        return False


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)

    if args.create_scenario:
        success = create_scenario_config(args.create_scenario, args)
    elif args.config:
        success = run_from_config(args.config, args)
    else:
        success = run_from_scenario(args.scenario, args)

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
