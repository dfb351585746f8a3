"""All-pairs proximity scan.

Contact detection is read-only: locations never change while contacts are
applied, so detecting every in-contact pair first and then applying them
serially in (i, j) order reproduces the sequential scan exactly.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum

import numpy as np

from epidemic_abm.domain.geometry import Location, distance

ContactPair = tuple[int, int]

SCAN_BLOCK_ELEMENTS = 1 << 20
"""Upper bound on pair cells held in memory at once by the numpy scan."""


class ScanBackend(Enum):
    """Implementation used for all-pairs contact detection.

    Both backends examine every pair and return identical contact lists.
    """

    PYTHON = "python"
    NUMPY = "numpy"


def iter_contact_pairs(locations: Sequence[Location], threshold: float) -> Iterator[ContactPair]:
    """Yield every (i, j), i < j, with distance <= threshold in lexicographic order."""
    n = len(locations)
    for i in range(n - 1):
        a = locations[i]
        for j in range(i + 1, n):
            if distance(a, locations[j]) <= threshold:
                yield i, j


def _numpy_contact_pairs(
    locations: Sequence[Location],
    threshold: float,
    block_elements: int = SCAN_BLOCK_ELEMENTS,
) -> list[ContactPair]:
    """Vectorised all-pairs detection over blocks of rows.

    Rows ``[i0, i1)`` are compared against columns ``i0:`` only, so each block
    holds at most ``max(block_elements, n)`` cells. Blocks are visited in row order
    and nonzero is row-major within a block, which yields (i, j) order.
    """
    n = len(locations)
    if n < 2:
        return []
    xs = np.fromiter((loc.x for loc in locations), dtype=np.int64, count=n)
    ys = np.fromiter((loc.y for loc in locations), dtype=np.int64, count=n)
    rows_per_block = max(1, block_elements // n)
    pairs: list[ContactPair] = []
    for i0 in range(0, n - 1, rows_per_block):
        i1 = min(i0 + rows_per_block, n)
        dx = xs[i0:i1, None] - xs[None, i0:]
        dy = ys[i0:i1, None] - ys[None, i0:]
        # sqrt of the exact integer square sum, as in distance()
        dist = np.sqrt((dx * dx + dy * dy).astype(np.float64))
        # local column c is j = i0 + c and local row r is i = i0 + r; keep j > i
        mask = np.triu(dist <= threshold, k=1)
        rows, cols = np.nonzero(mask)
        pairs.extend(zip((rows + i0).tolist(), (cols + i0).tolist(), strict=True))
    return pairs


def find_contacts(
    locations: Sequence[Location],
    threshold: float,
    backend: ScanBackend = ScanBackend.NUMPY,
) -> list[ContactPair]:
    """Return all in-contact index pairs in increasing (i, j) order."""
    if backend == ScanBackend.NUMPY:
        return _numpy_contact_pairs(locations, threshold)
    return list(iter_contact_pairs(locations, threshold))
