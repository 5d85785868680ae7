from typing import Union

from strobemers.constants.constants import COMPL_BASES, SEQ_NT4_TABLE

Base = Union[int, bytes, str]


def _byte(b: Base) -> int:
    if isinstance(b, int):
        return b & 0xFF
    if isinstance(b, str):
        b = b.encode("latin-1", errors="replace")
    if len(b) != 1:
        raise ValueError(f"expected a single base, got {b!r}")
    return b[0]


def complement(b: Base) -> int:
    """
    Complementary base for a single nucleotide byte.

    Args:
    b: the base as an int, a length-1 bytes or a length-1 str

    Returns:
    the ASCII code of the complement (A<->T, C<->G, U -> A), or ord('N')
    for anything else
    """
    return COMPL_BASES[_byte(b)]


def nt4(b: Base) -> int:
    """
    2-bit code of a nucleotide: A=0, C=1, G=2, T/U=3, anything else 4.
    """
    return SEQ_NT4_TABLE[_byte(b)]


def reverse_complement(seq: Union[bytes, str]) -> Union[bytes, str]:
    """
    Get reverse complement of a DNA sequence
    Handles both uppercase and lowercase input, unknown bases become N

    Args:
    seq: DNA sequence as bytes or str

    Returns:
    Reverse complement, same type as the input
    """
    if isinstance(seq, str):
        return seq.encode("ascii")[::-1].translate(COMPL_BASES).decode("ascii")
    return bytes(seq)[::-1].translate(COMPL_BASES)
