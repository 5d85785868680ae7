from typing import Optional

from strobemers.seed.base import StrobeIterator
from strobemers.seed.window import masked_argmin


class RandStrobes(StrobeIterator):
    """
    RandStrobes of order 2 or 3.

    The next strobe is the candidate p minimizing (base + hashes[p]) & prime,
    where base is the hash of the strobes picked so far. Since the score
    depends on the anchor, nothing can be shared between anchors and every
    window is scanned.
    """

    def _choose(self, base_hash: int, start: int, end: int) -> int:
        return masked_argmin(self._hashes, base_hash, start, end, self._prime)

    def _next_order2(self) -> Optional[int]:
        idx = self._idx
        if idx > self._end_idx:
            return None

        w_start = idx + self.params.w_min
        w_end = idx + self.params.w_max
        if w_end > self._end_hash:
            if not self._shrink:
                return None
            w_end = self._end_hash
            if w_start > w_end:
                return None

        self._h1 = int(self._hashes[idx])
        self._idx2 = self._choose(self._h1, w_start, w_end)
        self._h2 = self._h1 // 2 + int(self._hashes[self._idx2]) // 3

        self._idx += 1
        return self._h2

    def _next_order3(self) -> Optional[int]:
        idx = self._idx
        if idx > self._end_idx:
            return None

        w_min, w_max = self.params.w_min, self.params.w_max
        w1_start = idx + w_min
        w1_end = idx + w_max
        w2_start = idx + w_max + w_min
        w2_end = idx + 2 * w_max

        if w2_start > self._end_hash:
            return None
        if w2_end > self._end_hash:
            if not self._shrink:
                return None
            w2_end = self._end_hash

        self._h1 = int(self._hashes[idx])
        self._idx2 = self._choose(self._h1, w1_start, w1_end)
        self._h2 = self._h1 // 3 + int(self._hashes[self._idx2]) // 4

        self._idx3 = self._choose(self._h2, w2_start, w2_end)
        self._h3 = self._h2 + int(self._hashes[self._idx3]) // 5

        self._idx += 1
        return self._h3
