from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class KmerHasher(Protocol):
    """
    Hashes every substring of length k of a sequence.

    hash_all(seq, k) must return exactly len(seq) - k + 1 unsigned 64-bit
    values, one per start position, left to right. Identical inputs must give
    identical output. Implementations should be stateless (or internally
    synchronized) so one hasher can serve engines running in different threads.

    Expected errors: StrobeLengthTooSmall when k is outside [1, 64] and
    SequenceTooShort when len(seq) < k. Anything else is wrapped in HasherError
    by the engine.
    """

    def hash_all(self, seq: bytes, k: int) -> Sequence[int]:
        ...
