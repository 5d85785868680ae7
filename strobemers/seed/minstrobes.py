from typing import Optional

from strobemers.hashing.base import KmerHasher
from strobemers.models.params import Sequence
from strobemers.seed.base import StrobeIterator
from strobemers.seed.window import masked_argmin, sliding_min, window_argmin


class MinStrobes(StrobeIterator):
    """
    MinStrobes of order 2 or 3.

    Each strobe after the first is the substring with the smallest hash in a
    window of [w_min, w_max] positions past the previous strobe. The minimum of
    every full window is precomputed once with a sliding minimum over all
    hashes, so stepping is O(1) except near the end of the sequence where
    windows get clipped and are scanned directly.

    >>> ms = MinStrobes(b"ACGATCTGGTACCTAG", 2, 3, 3, 5)
    >>> len(list(ms))
    11
    """

    def __init__(
        self,
        sequence: Sequence,
        order: int,
        strobe_length: int,
        w_min: int,
        w_max: int,
        hasher: Optional[KmerHasher] = None,
    ):
        super().__init__(sequence, order, strobe_length, w_min, w_max, hasher=hasher)

        # min_loc[i] / min_val[i]: minimum over the window of candidates ending at i
        self._min_loc, self._min_val = sliding_min(self._hashes, self.params.window_width)
        self._min_loc.flags.writeable = False
        self._min_val.flags.writeable = False

    @property
    def min_locations(self):
        return self._min_loc

    @property
    def min_values(self):
        return self._min_val

    def _next_order2(self) -> Optional[int]:
        idx = self._idx
        if idx > self._end_idx:
            return None

        w_start = idx + self.params.w_min
        w_end = idx + self.params.w_max

        # window runs past the last hash: stop, or shrink it
        if w_end > self._end_hash:
            if not self._shrink:
                return None
            w_end = self._end_hash
            if w_start > w_end:
                return None

        self._h1 = int(self._hashes[idx])

        if w_end == idx + self.params.w_max:
            # full window, its minimum is precomputed at the right edge
            self._idx2 = int(self._min_loc[w_end])
            best = int(self._min_val[w_end])
        else:
            # clipped window has a different width, scan it
            self._idx2 = window_argmin(self._hashes, w_start, w_end)
            best = int(self._hashes[self._idx2])

        self._h2 = self._h1 // 2 + best // 3
        self._idx += 1
        return self._h2

    def _next_order3(self) -> Optional[int]:
        idx = self._idx
        if idx > self._end_idx:
            return None

        w_min, w_max = self.params.w_min, self.params.w_max
        w1_end = idx + w_max
        w2_start = idx + w_max + w_min
        w2_end = idx + 2 * w_max

        # no room for a third strobe
        if w2_start > self._end_hash:
            return None
        if w2_end > self._end_hash:
            if not self._shrink:
                return None
            w2_end = self._end_hash

        self._h1 = int(self._hashes[idx])

        # w1_end < w2_start <= end_hash, so the first window is always full
        self._idx2 = int(self._min_loc[w1_end])
        self._h2 = self._h1 // 3 + int(self._min_val[w1_end]) // 4

        if w2_end == idx + 2 * w_max:
            self._idx3 = int(self._min_loc[w2_end])
            self._h3 = self._h2 + int(self._min_val[w2_end]) // 5
        else:
            # NOTE: a clipped second window is picked by the masked
            # combination with h2, not by the raw minimum used for full
            # windows. Existing order-3 fingerprints depend on this.
            self._idx3 = masked_argmin(self._hashes, self._h2, w2_start, w2_end, self._prime)
            self._h3 = self._h2 + int(self._hashes[self._idx3]) // 5

        self._idx += 1
        return self._h3
