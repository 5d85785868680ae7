import numbers
from dataclasses import dataclass
from typing import Union

from strobemers.constants.constants import (
    DEFAULT_ORDER,
    DEFAULT_STROBE_LENGTH,
    DEFAULT_W_MAX,
    DEFAULT_W_MIN,
    MAX_STROBE_LENGTH,
    SUPPORTED_ORDERS,
)
from strobemers.errors import (
    InvalidSequence,
    InvalidWindowOffsets,
    OrderNotSupported,
    SequenceTooShort,
    StrobeLengthTooSmall,
)

Sequence = Union[bytes, bytearray, memoryview, str]


@dataclass(frozen=True)
class StrobeParams:
    order: int = DEFAULT_ORDER
    strobe_length: int = DEFAULT_STROBE_LENGTH
    w_min: int = DEFAULT_W_MIN
    w_max: int = DEFAULT_W_MAX

    @property
    def window_width(self) -> int:
        # width of the precomputed sliding minimum, one candidate window
        return self.w_max - self.w_min + 1

    def min_sequence_length(self) -> int:
        return min_sequence_length(self.order, self.strobe_length, self.w_min, self.w_max)


def min_sequence_length(order: int, k: int, w_min: int, w_max: int) -> int:
    """
    Smallest sequence length that yields at least one strobemer.

    The anchor at position 0 needs room for `order` strobes of length k
    (end_idx >= 0) and for its last window to start inside the hashes
    (w_min for order 2, w_max + w_min for order 3).
    """
    return k + max((order - 1) * k, (order - 2) * w_max + w_min)


def to_bytes(sequence: Sequence) -> bytes:
    """
    Normalize the input sequence to ASCII bytes.

    Raises InvalidSequence for empty or non-ASCII input.
    """
    if isinstance(sequence, str):
        try:
            seq = sequence.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidSequence("contains non-ASCII") from None
    elif isinstance(sequence, (bytes, bytearray, memoryview)):
        seq = bytes(sequence)
        if not seq.isascii():
            raise InvalidSequence("contains non-ASCII")
    else:
        raise InvalidSequence(f"expected bytes or str, got {type(sequence).__name__}")

    if not seq:
        raise InvalidSequence("empty")
    return seq


def _as_int(value):
    # bools are ints in Python but never a meaningful parameter here
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return None
    return int(value)


def validate_params(seq: bytes, order, k, w_min, w_max) -> StrobeParams:
    """
    Check all preconditions for building a strobemer iterator.

    Checks run in a fixed order (sequence, order, strobe length, window
    offsets, sequence length) so the first failing one is reported.

    Args:
    seq: the sequence, already normalized by to_bytes
    order: strobemer order, 2 or 3
    k: strobe length, 1..=64
    w_min: minimum window offset, >= 1
    w_max: maximum window offset, >= w_min

    Returns:
    the validated StrobeParams
    """
    if not seq:
        raise InvalidSequence("empty")
    if _as_int(order) not in SUPPORTED_ORDERS:
        raise OrderNotSupported(order)
    k_ = _as_int(k)
    if k_ is None or not 1 <= k_ <= MAX_STROBE_LENGTH:
        raise StrobeLengthTooSmall(k)
    lo, hi = _as_int(w_min), _as_int(w_max)
    if lo is None or hi is None or lo < 1 or hi < 1 or lo > hi:
        raise InvalidWindowOffsets(w_min, w_max)

    params = StrobeParams(order=int(order), strobe_length=k_, w_min=lo, w_max=hi)
    required = params.min_sequence_length()
    if len(seq) < required:
        raise SequenceTooShort(len(seq), required)
    return params
