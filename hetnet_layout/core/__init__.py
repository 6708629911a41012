"""Core deployment planning components."""

from .config import DeploymentConfig
from .deployment import DeploymentPlanner, DeploymentLayout

__all__ = ['DeploymentConfig', 'DeploymentPlanner', 'DeploymentLayout']
