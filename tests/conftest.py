"""Pytest configuration and shared fixtures."""

import pytest

from tests.test_data import L, SEQ, W_MAX, W_MIN


class ByteSumHasher:
    """Hash of a substring is the sum of its bytes."""

    def hash_all(self, seq, k):
        return [sum(seq[i:i + k]) for i in range(len(seq) - k + 1)]


class FixedHasher:
    """Returns a fixed list of hashes regardless of the sequence."""

    def __init__(self, values):
        self.values = list(values)

    def hash_all(self, seq, k):
        return list(self.values)


@pytest.fixture
def regression_args():
    """Positional constructor arguments minus the order."""
    return SEQ, L, W_MIN, W_MAX


@pytest.fixture
def byte_sum_hasher():
    return ByteSumHasher()


@pytest.fixture
def fixed_hasher():
    """Factory for hashers returning predetermined values."""
    return FixedHasher
