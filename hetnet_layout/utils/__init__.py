"""
Utility modules for deployment planning.

This module provides configuration loading, export and visualization utilities.
"""

from .config_parser import ConfigParser
from .export import LayoutExporter
from .visualization import DeploymentVisualizer

__all__ = ['ConfigParser', 'LayoutExporter', 'DeploymentVisualizer']
