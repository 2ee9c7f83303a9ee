"""
Stencil operators.

Both operators read a small clamp-to-edge neighbourhood around each pixel of
a read-only input and write disjoint output rows, so they run row-parallel
through ``parallel_rows``.
"""

import logging
import warnings

import numpy as np

from ..config import OPERATOR_CONFIG
from ..core.color import to_grayscale
from ..core.data_model import (RasterValueError, create_image, destroy_image,
                               require_bands)
from ..core.vector import Vec3, lerp
from ..utils.parallel import parallel_rows

logger = logging.getLogger(__name__)

__all__ = ['laplacian', 'sobel']


def laplacian(image, max_workers=None):
    """
    Gradient energy of a single-band image.

    Each output sample is ``(p - px)^2 + (p - py)^2`` where ``px`` and ``py``
    are the right and lower neighbours, clamped to the last column and row.
    The last column therefore has no x term and the last row no y term.

    Parameters
    ----------
    image : RasterImage
        Single-band input
    max_workers : int, optional
        Thread pool size

    Returns
    -------
    RasterImage
        New single-band image of the same size
    """
    require_bands(image, 1, "laplacian")
    width, height = image.width, image.height
    src = image.data.reshape(height, width)
    result = create_image(width, height, 1)
    dst = result.data.reshape(height, width)
    x1 = np.minimum(np.arange(width) + 1, width - 1)

    def rows(y0, y1):
        p = src[y0:y1]
        px = p[:, x1]
        py = src[np.minimum(np.arange(y0, y1) + 1, height - 1)]
        dst[y0:y1] = (p - px) * (p - px) + (p - py) * (p - py)

    parallel_rows(rows, height, max_workers=max_workers)
    logger.debug("laplacian(%r)", image)
    return result


def sobel(image, edge_color, legacy_sampling=None, max_workers=None):
    """
    Paint the edges of a color image with a flat color.

    The image is converted to grayscale and a Sobel-like gradient is taken
    over the clamp-to-edge 8-neighbourhood of every pixel. Pixels whose
    squared gradient magnitude exceeds ``OPERATOR_CONFIG['sobel_edge_threshold']``
    take ``edge_color``; all others keep their original color.

    Parameters
    ----------
    image : RasterImage
        3-band color input
    edge_color : Vec3 or sequence of float
        Color written at edge pixels
    legacy_sampling : bool, optional
        Take the left/right neighbours of the centre row from row 0 instead of
        the pixel's own row (historical heightmap-library sampling)
        (default: ``OPERATOR_CONFIG['sobel_legacy_sampling']``)
    max_workers : int, optional
        Thread pool size

    Returns
    -------
    RasterImage
        New 3-band image of the same size
    """
    require_bands(image, 3, "sobel")
    if not isinstance(edge_color, Vec3):
        try:
            edge_color = Vec3.from_iterable(edge_color)
        except (TypeError, ValueError) as e:
            raise RasterValueError(f"sobel: invalid edge_color {edge_color!r}: {e}") from e
    if legacy_sampling is None:
        legacy_sampling = OPERATOR_CONFIG['sobel_legacy_sampling']
    if legacy_sampling:
        warnings.warn("sobel: legacy sampling reads centre-row neighbours from row 0")
    threshold = OPERATOR_CONFIG['sobel_edge_threshold']

    width, height = image.width, image.height
    result = create_image(width, height, 3)
    src = image.grid
    dst = result.grid
    edge = edge_color.as_array(dtype=src.dtype)

    gray_image = to_grayscale(image)
    try:
        # Gradients in double precision
        gray = gray_image.data.reshape(height, width).astype(np.float64)
        xs = np.arange(width)
        xm1 = np.maximum(xs - 1, 0)
        xp1 = np.minimum(xs + 1, width - 1)

        def rows(y0, y1):
            ys = np.arange(y0, y1)
            ym1 = np.maximum(ys - 1, 0)
            yp1 = np.minimum(ys + 1, height - 1)
            ymid = np.zeros_like(ys) if legacy_sampling else ys

            top, mid, bottom = gray[ym1], gray[ymid], gray[yp1]
            t00, t10, t20 = top[:, xm1], top[:, xs], top[:, xp1]
            t01, t21 = mid[:, xm1], mid[:, xp1]
            t02, t12, t22 = bottom[:, xm1], bottom[:, xs], bottom[:, xp1]

            gx = t00 + 2.0 * t01 + t02 - t20 - 2.0 * t21 - t22
            gy = t00 + 2.0 * t10 + t20 - t02 - 2.0 * t12 - t22
            is_edge = (gx * gx + gy * gy > threshold).astype(src.dtype)
            dst[y0:y1] = lerp(src[y0:y1], edge, is_edge[:, :, np.newaxis])

        parallel_rows(rows, height, max_workers=max_workers)
    finally:
        destroy_image(gray_image)

    logger.debug("sobel(%r, edge_color=%r, legacy_sampling=%s)",
                 image, edge_color, legacy_sampling)
    return result
