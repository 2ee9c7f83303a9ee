"""
Reduction operators.
"""

import logging

import numpy as np

from ..core.data_model import RasterImage, require_bands

logger = logging.getLogger(__name__)

__all__ = ['sweep']


def sweep(image):
    """
    Average each row of a single-band image.

    Parameters
    ----------
    image : RasterImage
        Single-band input

    Returns
    -------
    RasterImage
        New ``1 x height`` single-band image; row ``y`` holds the mean of
        input row ``y``
    """
    require_bands(image, 1, "sweep")
    rows = image.data.reshape(image.height, image.width)
    means = rows.sum(axis=1, dtype=np.float64) / image.width
    logger.debug("sweep(%r)", image)
    return RasterImage(1, image.height, 1, means)
