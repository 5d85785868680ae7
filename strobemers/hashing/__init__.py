from strobemers.hashing.base import KmerHasher  # noqa: F401
from strobemers.hashing.hash import NucleotideHash  # noqa: F401
