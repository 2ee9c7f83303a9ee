"""
Core functionality for raster_ops.

This module contains the raster image type and the collaborators the
operators are built on: image allocation and addressing, color conversion
and 3-vector math.
"""

from .data_model import *
from .color import *
from .vector import *
