"""
Composition operators that tile several images into one.
"""

import logging

from ..core.data_model import create_image, require_same_shape
from ..utils.parallel import parallel_rows

logger = logging.getLogger(__name__)

__all__ = ['stitch_horizontal', 'stitch_vertical']


def stitch_horizontal(images, max_workers=None):
    """
    Place images side by side.

    Parameters
    ----------
    images : sequence of RasterImage
        One or more images with identical width, height and nbands
    max_workers : int, optional
        Thread pool size for the row-parallel copy

    Returns
    -------
    RasterImage
        New ``width * count x height`` image; columns
        ``[i * width, (i + 1) * width)`` hold image ``i``
    """
    images = list(images)
    require_same_shape(images, "stitch_horizontal")
    width, height, nbands = images[0].shape
    result = create_image(width * len(images), height, nbands)
    dst = result.grid
    tiles = [image.grid for image in images]

    def copy_rows(y0, y1):
        for tile, src in enumerate(tiles):
            dst[y0:y1, tile * width:(tile + 1) * width] = src[y0:y1]

    parallel_rows(copy_rows, height, max_workers=max_workers)
    logger.debug("stitch_horizontal: %d tiles -> %r", len(images), result)
    return result


def stitch_vertical(images):
    """
    Stack images top to bottom.

    Parameters
    ----------
    images : sequence of RasterImage
        One or more images with identical width, height and nbands

    Returns
    -------
    RasterImage
        New ``width x height * count`` image; rows
        ``[i * height, (i + 1) * height)`` hold image ``i``
    """
    images = list(images)
    require_same_shape(images, "stitch_vertical")
    width, height, nbands = images[0].shape
    result = create_image(width, height * len(images), nbands)
    size = width * height * nbands
    # Whole buffers are contiguous and tiles stack along rows
    for tile, image in enumerate(images):
        result.data[tile * size:(tile + 1) * size] = image.data
    logger.debug("stitch_vertical: %d tiles -> %r", len(images), result)
    return result
