"""
Raster operators.

This module provides the pixel-grid operators: elementwise maps,
row reductions, tiling of several images, and stencil operators
such as gradient energy and Sobel edge detection.
"""

from .elementwise import *
from .reduction import *
from .composition import *
from .stencil import *
