"""
Elementwise operators.

Each output sample depends only on the input sample at the same offset, so
these run as single vectorised passes over the flat buffer.
"""

import logging

import numpy as np

from ..core.data_model import (RasterImage, RasterValueError, require_bands,
                               require_same_shape)

logger = logging.getLogger(__name__)

__all__ = ['step', 'normalize', 'accumulate']


def step(image, threshold):
    """
    Threshold a single-band image.

    Parameters
    ----------
    image : RasterImage
        Single-band input
    threshold : float
        Samples greater than or equal to this become 1, the rest 0

    Returns
    -------
    RasterImage
        New single-band image of the same size
    """
    require_bands(image, 1, "step")
    src = image.data
    result = RasterImage(image.width, image.height, 1,
                         (src >= threshold).astype(src.dtype))
    logger.debug("step(%r, threshold=%s)", image, threshold)
    return result


def normalize(image, minv, maxv):
    """
    Remap samples from ``[minv, maxv]`` to ``[0, 1]``, clamping outside values.

    Parameters
    ----------
    image : RasterImage
        Input with any number of bands
    minv : float
        Value mapped to 0
    maxv : float
        Value mapped to 1; must differ from ``minv``

    Returns
    -------
    RasterImage
        New image with the same dimensions and bands
    """
    if maxv == minv:
        raise RasterValueError("normalize requires maxv != minv")
    src = image.data
    scale = 1.0 / (maxv - minv)
    values = np.clip((src - minv) * scale, 0, 1).astype(src.dtype)
    logger.debug("normalize(%r, minv=%s, maxv=%s)", image, minv, maxv)
    return RasterImage(image.width, image.height, image.nbands, values)


def accumulate(dst, src):
    """
    Add ``src`` into ``dst`` in place, sample by sample across all bands.

    ``dst`` must not be accumulated into from several threads at once.

    Parameters
    ----------
    dst : RasterImage
        Destination, mutated
    src : RasterImage
        Source with the same width, height and nbands
    """
    require_same_shape([dst, src], "accumulate")
    np.add(dst.data, src.data, out=dst.data)
    logger.debug("accumulate(%r, %r)", dst, src)
