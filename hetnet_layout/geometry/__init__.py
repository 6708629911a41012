"""Geometry primitives and the deployment error hierarchy."""

from .box import Box, boxes_overlap, require_well_formed
from .errors import DeploymentError, InvalidAreaUsage, ConfigurationTooDense

__all__ = ['Box', 'boxes_overlap', 'require_well_formed',
           'DeploymentError', 'InvalidAreaUsage', 'ConfigurationTooDense']
