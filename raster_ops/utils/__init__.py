"""
Utility functions for the raster_ops package.

This module provides the execution helpers used
throughout the package.
"""

from .parallel import *
