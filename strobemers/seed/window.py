from collections import deque
from typing import Tuple

import numpy as np

from strobemers.constants.constants import U64_MASK, U64_MAX


def sliding_min(values, width: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Minimum of every trailing window of `width` values, in O(n)

    Returns: (locations, minima), both len(values) long
    locations[i] / minima[i] hold the index and value of the minimum of
    values[i - width + 1 .. i] (earliest index on ties). Only filled for
    i >= width - 1, earlier entries stay at (0, 2^64 - 1).

    Args:
    values: hash values (uint64 array or list of ints)
    width: window width, >= 1
    """
    if width < 1:
        raise ValueError(f"window size must be >= 1, got {width}")

    values = np.asarray(values, dtype=np.uint64)
    n = len(values)

    if width == 1:
        return np.arange(n, dtype=np.int64), values.copy()

    locs = np.zeros(n, dtype=np.int64)
    mins = np.full(n, U64_MAX, dtype=np.uint64)

    # (position, value) pairs, values non-decreasing front to back. never holds
    # more than `width` entries, so maxlen never silently drops one
    window = deque(maxlen=width)
    for i, h in enumerate(values.tolist()):
        window_start = i - (width - 1)

        # (at the front) drop minima that left the window
        while window and window[0][0] < window_start:
            window.popleft()

        # (at the back) drop anything larger than the incoming value. equal
        # values stay so the earliest position wins ties
        while window and window[-1][1] > h:
            window.pop()

        window.append((i, h))

        if window_start >= 0:
            locs[i], mins[i] = window[0]

    return locs, mins


def window_argmin(values: np.ndarray, start: int, end: int) -> int:
    """Earliest position of the smallest value in values[start..=end]."""
    return start + int(np.argmin(values[start:end + 1]))


def masked_argmin(values: np.ndarray, base: int, start: int, end: int, mask: int) -> int:
    """
    Earliest position p in [start, end] minimizing (base + values[p]) & mask

    The addition wraps modulo 2^64.
    """
    scores = (values[start:end + 1] + np.uint64(base & U64_MASK)) & np.uint64(mask & U64_MASK)
    return start + int(np.argmin(scores))
