"""
Core data model for raster images.

This module defines the raster image type shared by every operator, the
errors raised on precondition violations, and the small image store used to
allocate, address and release images.
"""

import logging

import numpy as np

from ..config import OPERATOR_CONFIG

logger = logging.getLogger(__name__)

__all__ = [
    'RasterError',
    'RasterShapeError',
    'RasterValueError',
    'RasterImage',
    'create_image',
    'destroy_image',
    'texel',
    'from_array',
    'require_bands',
    'require_same_shape',
]


class RasterError(Exception):
    """Base class for raster errors."""
    pass


class RasterShapeError(RasterError, ValueError):
    """Band count or dimensions do not satisfy an operator's contract."""
    pass


class RasterValueError(RasterError, ValueError):
    """Invalid scalar argument or released image."""
    pass


class RasterImage:
    """
    A 2-D grid of float samples with interleaved bands.

    Samples live in a flat contiguous buffer laid out row-major with bands
    interleaved per pixel: pixel ``(x, y)`` band ``b`` is at offset
    ``(y * width + x) * nbands + b``.
    """

    def __init__(self, width, height, nbands, data=None):
        """
        Initialize a RasterImage.

        Parameters
        ----------
        width : int
            Number of columns
        height : int
            Number of rows
        nbands : int
            Number of interleaved channels per pixel
        data : array_like, optional
            Flat buffer of ``width * height * nbands`` samples. A zero-filled
            buffer is allocated when omitted.
        """
        for name, value in (('width', width), ('height', height), ('nbands', nbands)):
            if int(value) != value or value < 1:
                raise RasterShapeError(f"{name} must be a positive integer, got {value!r}")

        self.width = int(width)
        self.height = int(height)
        self.nbands = int(nbands)

        size = self.width * self.height * self.nbands
        dtype = np.dtype(OPERATOR_CONFIG['dtype'])
        if data is None:
            self._data = np.zeros(size, dtype=dtype)
        else:
            buf = np.ascontiguousarray(data, dtype=dtype).reshape(-1)
            if buf.size != size:
                raise RasterShapeError(
                    f"Buffer holds {buf.size} samples, expected {size} "
                    f"for {self.width}x{self.height}x{self.nbands}")
            self._data = buf

    def __repr__(self):
        state = "" if self._data is not None else ", destroyed"
        return f"RasterImage({self.width}x{self.height}, nbands={self.nbands}{state})"

    @property
    def data(self):
        """Flat sample buffer."""
        if self._data is None:
            raise RasterValueError("Image has been destroyed")
        return self._data

    @property
    def destroyed(self):
        return self._data is None

    @property
    def shape(self):
        """Dimensions as ``(width, height, nbands)``."""
        return (self.width, self.height, self.nbands)

    @property
    def grid(self):
        """``(height, width, nbands)`` view sharing the sample buffer."""
        return self.data.reshape(self.height, self.width, self.nbands)

    def sample(self, x, y, band=0):
        """
        Get a single sample.

        Parameters
        ----------
        x, y : int
            Pixel coordinates
        band : int, optional
            Band index

        Returns
        -------
        float
            The sample value
        """
        if not 0 <= band < self.nbands:
            raise IndexError(f"Band {band} out of range for {self.nbands} bands")
        return float(texel(self, x, y)[band])

    def copy(self):
        return RasterImage(self.width, self.height, self.nbands, self.data.copy())

    def to_array(self):
        """
        Copy the samples into a 2-D array for single-band images, 3-D otherwise.
        """
        grid = self.grid.copy()
        if self.nbands == 1:
            return grid[:, :, 0]
        return grid


def create_image(width, height, nbands):
    """
    Allocate a zero-filled image.

    Parameters
    ----------
    width, height, nbands : int
        Image dimensions

    Returns
    -------
    RasterImage
        A new image owned by the caller
    """
    return RasterImage(width, height, nbands)


def destroy_image(image):
    """Release the sample buffer of an image."""
    if image.destroyed:
        raise RasterValueError("Image has already been destroyed")
    logger.debug("Releasing %r", image)
    image._data = None


def texel(image, x, y):
    """
    Get the samples of one pixel.

    Parameters
    ----------
    image : RasterImage
        Image to address
    x, y : int
        Pixel coordinates

    Returns
    -------
    numpy.ndarray
        Writable view of the ``nbands`` samples at ``(x, y)``
    """
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise IndexError(
            f"Texel ({x}, {y}) outside {image.width}x{image.height} image")
    offset = (y * image.width + x) * image.nbands
    return image.data[offset:offset + image.nbands]


def from_array(array):
    """
    Build an image from a ``(height, width)`` or ``(height, width, nbands)`` array.

    Parameters
    ----------
    array : array_like
        Sample values; copied into a new buffer

    Returns
    -------
    RasterImage
        New image with the array's dimensions
    """
    array = np.asarray(array)
    if array.ndim == 2:
        height, width = array.shape
        nbands = 1
    elif array.ndim == 3:
        height, width, nbands = array.shape
    else:
        raise RasterShapeError(f"Expected a 2-D or 3-D array, got {array.ndim} dimensions")
    return RasterImage(width, height, nbands, array.reshape(-1).copy())


def require_bands(image, nbands, operation):
    """Raise RasterShapeError unless ``image`` has exactly ``nbands`` bands."""
    if image.nbands != nbands:
        raise RasterShapeError(
            f"{operation} requires {nbands} band(s), got {image.nbands}")


def require_same_shape(images, operation):
    """Raise RasterShapeError unless all images share width, height and nbands."""
    if len(images) == 0:
        raise RasterShapeError(f"{operation} requires at least one image")
    first = images[0].shape
    for i, image in enumerate(images[1:], start=1):
        if image.shape != first:
            raise RasterShapeError(
                f"{operation}: image {i} is {image.width}x{image.height}x{image.nbands}, "
                f"expected {first[0]}x{first[1]}x{first[2]}")
