from typing import NamedTuple


class Strobemer(NamedTuple):
    hash: int       # combined fingerprint
    anchor: int     # start of the first strobe
    second: int     # start of the second strobe
    third: int = 0  # start of the third strobe, 0 for order 2
