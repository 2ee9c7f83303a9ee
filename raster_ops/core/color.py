"""
Color conversions for raster images.
"""

import logging

import numpy as np

from .data_model import RasterImage, require_bands

logger = logging.getLogger(__name__)

__all__ = ['LUMA_WEIGHTS', 'to_grayscale']

# Rec. 601 luma
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def to_grayscale(image):
    """
    Convert a 3-band color image to a single-band luminance image.

    Parameters
    ----------
    image : RasterImage
        Image with ``nbands == 3``

    Returns
    -------
    RasterImage
        New single-band image of the same size
    """
    require_bands(image, 3, "to_grayscale")
    rgb = image.data.reshape(-1, 3)
    gray = rgb @ np.asarray(LUMA_WEIGHTS, dtype=rgb.dtype)
    logger.debug("Converted %r to grayscale", image)
    return RasterImage(image.width, image.height, 1, gray)
