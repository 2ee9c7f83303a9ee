"""
Row-parallel execution for raster operators.

Operators hand ``parallel_rows`` a closure that fills a contiguous band of
output rows. Chunks never overlap and each output row is written by exactly
one chunk, so the result does not depend on the chunk size or the number of
workers.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from ..config import EXECUTION_CONFIG, resolve_max_workers

logger = logging.getLogger(__name__)

__all__ = ['row_chunks', 'parallel_rows']


def row_chunks(height, nchunks, min_rows=1):
    """
    Split ``[0, height)`` into at most ``nchunks`` contiguous ranges.

    Parameters
    ----------
    height : int
        Number of rows
    nchunks : int
        Upper bound on the number of ranges
    min_rows : int, optional
        Minimum rows per range (the last range may be shorter)

    Returns
    -------
    list of tuple
        ``(y0, y1)`` half-open row ranges covering every row once
    """
    if height <= 0:
        return []
    rows = max(min_rows, -(-height // max(nchunks, 1)))
    return [(y0, min(y0 + rows, height)) for y0 in range(0, height, rows)]


def parallel_rows(func, height, max_workers=None, chunk_rows=None):
    """
    Run ``func(y0, y1)`` over row chunks on a thread pool and wait for all.

    Parameters
    ----------
    func : callable
        Fills output rows ``[y0, y1)``; must only read shared inputs
    height : int
        Number of output rows
    max_workers : int, optional
        Thread pool size (default: ``EXECUTION_CONFIG['max_workers']`` or CPU count)
    chunk_rows : int, optional
        Rows per chunk (default: spread evenly across workers, at least
        ``EXECUTION_CONFIG['min_rows_per_chunk']``)

    Raises
    ------
    Exception
        The first exception raised by a worker, after all chunks finished
    """
    workers = resolve_max_workers(max_workers)
    if not EXECUTION_CONFIG.get('parallel', True):
        workers = 1

    if chunk_rows is None:
        chunks = row_chunks(height, workers, EXECUTION_CONFIG.get('min_rows_per_chunk', 1))
    else:
        chunks = row_chunks(height, -(-height // max(chunk_rows, 1)), chunk_rows)

    if workers == 1 or len(chunks) <= 1:
        for y0, y1 in chunks:
            func(y0, y1)
        return

    logger.debug("Running %d row chunks on %d workers", len(chunks), workers)
    with ThreadPoolExecutor(max_workers=min(workers, len(chunks))) as executor:
        futures = [executor.submit(func, y0, y1) for y0, y1 in chunks]
    # Leaving the executor joins every worker; surface the first failure
    for future in futures:
        future.result()
