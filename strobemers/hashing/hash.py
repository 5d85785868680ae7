import numpy as np

from strobemers.constants.constants import MAX_STROBE_LENGTH, NT_SEEDS, SEQ_NT4_TABLE
from strobemers.errors import SequenceTooShort, StrobeLengthTooSmall
from strobemers.utils.bits import rol64
from strobemers.utils.nucleotide import reverse_complement


class NucleotideHash:
    """
    Default substring hasher: ntHash-style rotate-xor rolling hash.

    Every base maps to a fixed 64-bit seed (unknown bases to 0), and a k-mer
    hashes to the xor of its seeds, the base at offset i rotated left by
    k - 1 - i bits. All k bases reach the result for any k <= 64 and a single
    base change flips many bits.

    With canonical=True every position gets min(forward, reverse complement)
    so both strands of a k-mer hash the same.
    """

    def __init__(self, canonical: bool = False):
        self.seeds = NT_SEEDS
        self.canonical = canonical

    def __repr__(self):
        return f"NucleotideHash(canonical={self.canonical})"

    def hash_sequence(self, s) -> int:
        if isinstance(s, str):
            s = s.encode("ascii")
        codes = bytes(s).translate(SEQ_NT4_TABLE)
        k = len(codes)
        h = 0
        for i, c in enumerate(codes):
            h ^= rol64(self.seeds[c], k - 1 - i)
        return h

    def update(self, prev_hash: int, out_char, in_char, k: int) -> int:
        """
        Rolling hash update - removes leftmost character and adds rightmost character

        Args:
            prev_hash: The previous hash value
            out_char: Character leaving the window (leftmost)
            in_char: Character entering the window (rightmost)
            k: k-mer length the previous hash was computed over

        Returns:
            Updated hash value
        """
        out_val = self.seeds[SEQ_NT4_TABLE[_ord(out_char)]]
        in_val = self.seeds[SEQ_NT4_TABLE[_ord(in_char)]]
        return self._roll_one(prev_hash, out_val, in_val, k)

    def _roll_one(self, prev_hash: int, out_seed: int, in_seed: int, k: int) -> int:
        # shift every base one position left, drop the outgoing one, xor in the new one
        return rol64(prev_hash, 1) ^ rol64(out_seed, k) ^ in_seed

    def _rolling(self, seq: bytes, k: int) -> list:
        seeds = [self.seeds[c] for c in seq.translate(SEQ_NT4_TABLE)]

        h = 0
        for i in range(k):
            h ^= rol64(seeds[i], k - 1 - i)

        out = [h]
        for i in range(k, len(seeds)):
            h = self._roll_one(h, seeds[i - k], seeds[i], k)
            out.append(h)
        return out

    def hash_all(self, seq, k: int) -> np.ndarray:
        """
        Hash every k-mer of seq.

        Args:
        seq: nucleotide sequence (bytes or str)
        k: k-mer length, 1..=64

        Returns:
        uint64 array of len(seq) - k + 1 hashes
        """
        if not 1 <= k <= MAX_STROBE_LENGTH:
            raise StrobeLengthTooSmall(k)
        if isinstance(seq, str):
            seq = seq.encode("ascii")
        seq = bytes(seq)
        if len(seq) < k:
            raise SequenceTooShort(len(seq), k)

        fwd = self._rolling(seq, k)
        if self.canonical:
            # k-mer at i reverse complemented starts at len(seq) - k - i in the rc
            rev = self._rolling(reverse_complement(seq), k)
            n = len(fwd)
            fwd = [min(f, rev[n - 1 - i]) for i, f in enumerate(fwd)]

        return np.array(fwd, dtype=np.uint64)


def _ord(c) -> int:
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        return ord(c) & 0xFF
    return c[0]
