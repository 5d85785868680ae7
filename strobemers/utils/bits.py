def roundup64(x: int) -> int:
    """
    Round x up to the next power of two (x itself if it already is one).

    roundup64(5) -> 8, roundup64(8) -> 8, roundup64(0) -> 1
    """
    if x <= 1:
        return 1
    return 1 << (x - 1).bit_length()


def mask_from_prime(q: int) -> int:
    """2^m - 1 mask derived from a requested prime, e.g. 300 -> 511."""
    return roundup64(q) - 1


def rol64(x: int, r: int) -> int:
    """Rotate a 64-bit value left by r bits (r taken mod 64)."""
    r %= 64
    if r == 0:
        return x
    return ((x << r) | (x >> (64 - r))) & 0xFFFFFFFFFFFFFFFF
