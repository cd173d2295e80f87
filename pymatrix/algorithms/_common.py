"""
Shared partitioning and fork/join helpers for the blocked and parallel kernels.

Correctness of the parallel kernels rests on the partitions produced here
being exact: every index in [0, n) is covered by exactly one range, and
ranges never overlap. No locks are taken anywhere.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Sequence

from pymatrix.core.protocols import BasicMatrix
from pymatrix.matrix.storage import Matrix, create

logger = logging.getLogger(__name__)


def tile_ranges(n: int, block: int) -> list[tuple[int, int]]:
    """
    Cover [0, n) with consecutive (start, size) tiles of at most block.

    The last tile is smaller when block does not divide n.

    Example:
        >>> tile_ranges(10, 4)
        [(0, 4), (4, 4), (8, 2)]
    """
    return [(start, min(block, n - start)) for start in range(0, n, block)]


def split_range(n: int, parts: int) -> list[tuple[int, int]]:
    """
    Cover [0, n) with at most `parts` near-equal (start, size) bands.

    Band sizes differ by at most one; empty bands are never produced.

    Example:
        >>> split_range(10, 3)
        [(0, 4), (4, 3), (7, 3)]
    """
    parts = max(1, min(parts, n))
    base, rem = divmod(n, parts)
    bands = []
    start = 0
    for p in range(parts):
        size = base + (1 if p < rem else 0)
        if size:
            bands.append((start, size))
        start += size
    return bands


def lower_tiles(n: int, block: int) -> list[tuple[int, int, int, int]]:
    """
    Tiles (i0, rows, j0, cols) of an n x n matrix that touch the lower triangle.

    Tiles on the diagonal are included whole; callers restrict themselves
    to j <= i inside them.
    """
    ranges = tile_ranges(n, block)
    return [
        (i0, rows, j0, cols)
        for i0, rows in ranges
        for j0, cols in ranges
        if j0 <= i0
    ]


def lower_copy(A: BasicMatrix) -> Matrix:
    """New matrix holding the lower triangle of A, zeros strictly above the diagonal."""
    zero = A.ring.zero()
    return create(
        A.num_rows(),
        A.num_cols(),
        lambda i, j: A.get(i, j) if i >= j else zero,
        A.ring,
    )


def fork_join(tasks: Sequence[Callable[[], None]], num_workers: int) -> None:
    """
    Run every task on a thread pool and wait for all of them.

    Tasks must write to disjoint regions. If any task raises, the first
    failure (in submission order) is re-raised after every task has
    finished; no partial result is meant to be used.
    """
    if not tasks:
        return
    if num_workers == 1 or len(tasks) == 1:
        for task in tasks:
            task()
        return

    workers = min(num_workers, len(tasks))
    logger.debug("fork_join: %d tasks on %d workers", len(tasks), workers)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='pymatrix') as pool:
        futures = [pool.submit(task) for task in tasks]
        wait(futures)
    for future in futures:
        future.result()
