from enum import Enum
from typing import Optional, Union

from strobemers.hashing.base import KmerHasher
from strobemers.models.params import Sequence
from strobemers.seed.base import StrobeIterator
from strobemers.seed.minstrobes import MinStrobes
from strobemers.seed.randstrobes import RandStrobes


class StrobeMethod(str, Enum):
    MINSTROBES = "minstrobes"
    RANDSTROBES = "randstrobes"


_ENGINES = {
    StrobeMethod.MINSTROBES: MinStrobes,
    StrobeMethod.RANDSTROBES: RandStrobes,
}


def build_strobes(
    sequence: Sequence,
    method: Union[StrobeMethod, str],
    order: int,
    strobe_length: int,
    w_min: int,
    w_max: int,
    hasher: Optional[KmerHasher] = None,
    prime: Optional[int] = None,
    shrink: bool = True,
) -> StrobeIterator:
    """
    Build a strobemer iterator for the given selection method.

    Args:
    sequence: nucleotide sequence
    method: StrobeMethod or its name ("minstrobes" / "randstrobes")
    order, strobe_length, w_min, w_max: strobemer parameters
    hasher: optional substring hasher
    prime: optional mask seed passed to set_prime
    shrink: window shrink policy

    Raises ValueError for an unknown method, StrobeError for bad parameters.
    """
    engine_cls = _ENGINES[StrobeMethod(method)]
    engine = engine_cls(sequence, order, strobe_length, w_min, w_max, hasher=hasher)
    if prime is not None:
        engine.set_prime(prime)
    engine.set_window_shrink(shrink)
    return engine
