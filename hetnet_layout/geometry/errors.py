"""
Error hierarchy for deployment geometry.

All errors raised by the geometry, topology and placement modules derive
from DeploymentError so callers can treat them as one family of
configuration problems.
"""

from typing import Optional


class DeploymentError(Exception):
    """Base error for deployment layout problems."""


class InvalidAreaUsage(DeploymentError, ValueError):
    """An area or grid parameter is unusable (inverted box, zero sites, ...)."""


class ConfigurationTooDense(DeploymentError):
    """
    No free spot was found for an apartment block.

    Raised when every one of the allowed placement attempts overlapped an
    already placed block. The area is too small for the requested number
    of blocks.

    Attributes:
        area: The placement area
        n_requested: Number of blocks requested, if known
        n_placed: Number of blocks placed before the failure
        attempts: Number of candidates drawn for the failing block
    """

    def __init__(self, area, n_placed: int, attempts: int,
                 n_requested: Optional[int] = None):
        self.area = area
        self.n_placed = n_placed
        self.attempts = attempts
        self.n_requested = n_requested

        requested = f" of {n_requested}" if n_requested is not None else ""
        super().__init__(
            f"Too many failed attempts ({attempts}) to position apartment block "
            f"{n_placed + 1}{requested} in area "
            f"{area.width:.1f} x {area.height:.1f} m "
            f"[{area.x_min:.1f}, {area.x_max:.1f}] x [{area.y_min:.1f}, {area.y_max:.1f}]. "
            f"Too many blocks? Too small area?"
        )
