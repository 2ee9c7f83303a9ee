"""
raster_ops - pixel-grid operators over floating-point raster images for heightmap pipelines.
"""

import logging

__version__ = '0.1.0'

# Silent until the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Import main submodules for easy access
from . import config
from . import core
from . import processing
from . import utils

from .core import RasterImage, RasterShapeError, RasterValueError, Vec3
from .core import create_image, destroy_image, texel, from_array, to_grayscale
from .processing import (step, sweep, stitch_horizontal, stitch_vertical,
                         normalize, laplacian, accumulate, sobel)
