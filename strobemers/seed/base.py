"""Shared driver for the strobemer iterators.

Both engines validate their parameters, hash every strobe-length substring
once, and then walk anchors left to right. Only the strobe selection differs,
so subclasses implement ``_next_order2`` / ``_next_order3`` and return ``None``
once no further strobemer can be formed.
"""

import logging
import operator
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

import numpy as np

from strobemers.constants.constants import DEFAULT_PRIME_NUMBER, MIN_PRIME_NUMBER, U64_MASK, U64_MAX
from strobemers.errors import (
    HasherError,
    IncompleteHashValues,
    PrimeNumberTooSmall,
    StrobeError,
)
from strobemers.hashing.base import KmerHasher
from strobemers.hashing.hash import NucleotideHash
from strobemers.models.params import Sequence, StrobeParams, to_bytes, validate_params
from strobemers.models.strobemer import Strobemer
from strobemers.utils.bits import mask_from_prime

_log = logging.getLogger(__name__)


def compute_hashes(seq: bytes, k: int, hasher: KmerHasher) -> np.ndarray:
    """
    Run the hasher and check its output.

    Returns a read-only uint64 array of len(seq) - k + 1 values. StrobeErrors
    from the hasher propagate untouched, anything else becomes HasherError.
    """
    try:
        raw = hasher.hash_all(seq, k)
        if isinstance(raw, np.ndarray) and raw.dtype.kind != "O":
            if raw.dtype.kind not in "ui":
                raise TypeError(f"hash values must be integers, got dtype {raw.dtype}")
            if raw.dtype.kind == "i" and raw.size and int(raw.min()) < 0:
                raise ValueError("hash values must fit in an unsigned 64-bit integer")
            hashes = raw.astype(np.uint64)
        else:
            # index() refuses floats instead of truncating them
            raw = [operator.index(v) for v in raw]
            if any(v < 0 or v > U64_MAX for v in raw):
                raise ValueError("hash values must fit in an unsigned 64-bit integer")
            hashes = np.array(raw, dtype=np.uint64)
    except StrobeError:
        raise
    except Exception as exc:
        raise HasherError(hasher, exc) from exc

    expected = len(seq) - k + 1
    if hashes.ndim != 1 or hashes.shape[0] != expected:
        raise IncompleteHashValues(expected, int(hashes.size))

    hashes.flags.writeable = False
    return hashes


class StrobeIterator(ABC):
    """
    Iterator over the strobemer fingerprints of one sequence.

    Args:
    sequence: nucleotide sequence, ASCII bytes or str
    order: number of strobes per strobemer, 2 or 3
    strobe_length: length k of every strobe, 1..=64
    w_min: minimum offset of the next strobe from the previous one
    w_max: maximum offset (inclusive), w_min <= w_max
    hasher: substring hasher, NucleotideHash() when omitted
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
        seq = to_bytes(sequence)
        self.params: StrobeParams = validate_params(seq, order, strobe_length, w_min, w_max)
        self.hasher = hasher if hasher is not None else NucleotideHash()

        k = self.params.strobe_length
        self._hashes = compute_hashes(seq, k, self.hasher)

        # last index in hashes, and last anchor with room for `order` strobes
        self._end_hash = len(seq) - k
        self._end_idx = len(seq) - k - (self.params.order - 1) * k

        self._prime = DEFAULT_PRIME_NUMBER
        self._shrink = True

        # iteration state
        self._idx = 0
        self._idx2 = 0
        self._idx3 = 0
        self._h1 = 0
        self._h2 = 0
        self._h3 = 0

        _log.debug(
            "%s: %d hashes, order=%d k=%d w=[%d, %d]",
            type(self).__name__,
            len(self._hashes),
            self.params.order,
            k,
            self.params.w_min,
            self.params.w_max,
        )

    @classmethod
    def with_hasher(
        cls,
        sequence: Sequence,
        order: int,
        strobe_length: int,
        w_min: int,
        w_max: int,
        hasher: KmerHasher,
    ):
        return cls(sequence, order, strobe_length, w_min, w_max, hasher=hasher)

    def __repr__(self):
        p = self.params
        return (
            f"{type(self).__name__}(order={p.order}, strobe_length={p.strobe_length}, "
            f"w_min={p.w_min}, w_max={p.w_max}, prime={self._prime}, shrink={self._shrink})"
        )

    @property
    def hashes(self) -> np.ndarray:
        return self._hashes

    @property
    def prime(self) -> int:
        return self._prime

    @property
    def shrink(self) -> bool:
        return self._shrink

    def set_prime(self, q: int) -> None:
        """
        Set the mask used by the masked combination (base + hash) & prime.

        q is rounded up to the next power of two minus one, so 300 -> 511.
        Anything past 2^64 keeps all 64 bits. Raises PrimeNumberTooSmall for
        q < 256.
        """
        if q < MIN_PRIME_NUMBER:
            raise PrimeNumberTooSmall(q)
        self._prime = min(mask_from_prime(int(q)), U64_MASK)
        _log.debug("%s: prime mask set to %d (requested %d)", type(self).__name__, self._prime, q)

    def set_window_shrink(self, shrink: bool) -> None:
        """
        With shrink, windows running past the end are truncated; without it
        iteration stops at the first window that does not fit.
        """
        self._shrink = bool(shrink)

    def current_anchor_index(self) -> Optional[int]:
        """Start of the first strobe of the last returned strobemer, None before the first."""
        return self._idx - 1 if self._idx > 0 else None

    def current_indices(self) -> List[int]:
        """[first, second, third] strobe starts of the last strobemer; third is 0 for order 2."""
        anchor = self.current_anchor_index()
        return [anchor if anchor is not None else 0, self._idx2, self._idx3]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self.params.order == 2:
            value = self._next_order2()
        else:
            value = self._next_order3()
        if value is None:
            raise StopIteration
        return value

    def iter_strobemers(self) -> Iterator[Strobemer]:
        """Like iterating the engine, but yields each hash with its strobe positions."""
        for h in self:
            anchor, second, third = self.current_indices()
            yield Strobemer(h, anchor, second, third)

    @abstractmethod
    def _next_order2(self) -> Optional[int]:
        pass

    @abstractmethod
    def _next_order3(self) -> Optional[int]:
        pass
