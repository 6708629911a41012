"""
HeNB Deployment Geometry Generator

This package sizes macro hex grids, places femtocell apartment blocks and
derives population counts for macro + femtocell LTE deployment scenarios.
"""

__version__ = "1.0.0"
__author__ = "Carlos Lopes"
