"""
strobemers: strobemer fingerprints of nucleotide sequences.

This package provides:
- MinStrobes and RandStrobes iterators of order 2 and 3
- a pluggable substring hasher (KmerHasher) with a default rolling
  nucleotide hash
- an O(n) sliding window minimum
- nucleotide helpers (complement, 2-bit codes, reverse complement)

Examples
--------
>>> from strobemers import MinStrobes
>>> ms = MinStrobes(b"ACGATCTGGTACCTAG", 2, 3, 3, 5)
>>> hashes = list(ms)
"""

from strobemers.constants.constants import DEFAULT_PRIME_NUMBER  # noqa: F401
from strobemers.errors import (  # noqa: F401
    HasherError,
    IncompleteHashValues,
    InvalidSequence,
    InvalidWindowOffsets,
    OrderNotSupported,
    PrimeNumberTooSmall,
    SequenceTooShort,
    StrobeError,
    StrobeLengthTooSmall,
)
from strobemers.hashing import KmerHasher, NucleotideHash  # noqa: F401
from strobemers.models.params import StrobeParams, min_sequence_length  # noqa: F401
from strobemers.models.strobemer import Strobemer  # noqa: F401
from strobemers.seed import (  # noqa: F401
    MinStrobes,
    RandStrobes,
    StrobeIterator,
    StrobeMethod,
    build_strobes,
    sliding_min,
)
from strobemers.utils.bits import roundup64  # noqa: F401
from strobemers.utils.nucleotide import complement, nt4, reverse_complement  # noqa: F401

__version__ = '0.1.0'
__all__ = [
    'MinStrobes',
    'RandStrobes',
    'StrobeIterator',
    'StrobeMethod',
    'build_strobes',
    'Strobemer',
    'StrobeParams',
    'min_sequence_length',
    'KmerHasher',
    'NucleotideHash',
    'sliding_min',
    'complement',
    'nt4',
    'reverse_complement',
    'roundup64',
    'DEFAULT_PRIME_NUMBER',
    'StrobeError',
    'OrderNotSupported',
    'InvalidSequence',
    'SequenceTooShort',
    'StrobeLengthTooSmall',
    'InvalidWindowOffsets',
    'IncompleteHashValues',
    'PrimeNumberTooSmall',
    'HasherError',
]
