"""Exceptions raised while building strobemer iterators.

Every error is raised at construction time or from ``set_prime``; running out
of strobemers during iteration is a plain ``StopIteration``.
"""


class StrobeError(ValueError):
    """Base class for all strobemer errors."""


class OrderNotSupported(StrobeError):
    def __init__(self, order=None):
        super().__init__(f"strobemer order not supported (must be 2 or 3), got {order!r}")
        self.order = order


class InvalidSequence(StrobeError):
    def __init__(self, reason: str = "empty or contains non-ASCII"):
        super().__init__(f"invalid DNA sequence ({reason})")


class SequenceTooShort(StrobeError):
    def __init__(self, length: int = None, required: int = None):
        msg = "sequence too short for given parameters"
        if length is not None and required is not None:
            msg += f" (length {length}, need at least {required})"
        super().__init__(msg)
        self.length = length
        self.required = required


class StrobeLengthTooSmall(StrobeError):
    def __init__(self, k=None):
        super().__init__(f"strobe length must be >= 1 and <= 64, got {k!r}")
        self.k = k


class InvalidWindowOffsets(StrobeError):
    def __init__(self, w_min=None, w_max=None):
        super().__init__(
            f"window offsets must be > 0 and w_min <= w_max, got w_min={w_min!r}, w_max={w_max!r}"
        )
        self.w_min = w_min
        self.w_max = w_max


class IncompleteHashValues(StrobeError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"incomplete pre-computed hash values: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class PrimeNumberTooSmall(StrobeError):
    def __init__(self, q=None):
        super().__init__(f"prime number too small (must be >= 256), got {q!r}")
        self.q = q


class HasherError(StrobeError):
    """Wraps a failure raised by a user supplied hasher.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, hasher, cause: BaseException):
        super().__init__(f"hasher {type(hasher).__name__} failed: {cause}")
        self.hasher = hasher
