"""Tests for MinStrobes."""

import pytest

from strobemers import MinStrobes, Strobemer, min_sequence_length
from strobemers.errors import PrimeNumberTooSmall, SequenceTooShort
from strobemers.seed.window import sliding_min
from tests.test_data import MIN_O2, MIN_O2_SECOND, MIN_O3, MIN_O3_INDICES, SEQ


def test_order2_basic():
    """Test that a short sequence yields at least one strobemer."""
    ms = MinStrobes(b'ACGTACGTACGT', 2, 3, 1, 4)
    assert next(ms) is not None


def test_order3_basic():
    """Test that a repeated sequence yields many order-3 strobemers."""
    ms = MinStrobes(b'ACGTACGTACGTACGTACGTACGT', 3, 3, 1, 4)
    assert len(list(ms)) >= 10


def test_order2_counts(regression_args):
    """Test the number of order-2 strobemers of the regression sequence."""
    seq, k, w_min, w_max = regression_args
    assert len(list(MinStrobes(seq, 2, k, w_min, w_max))) == 11


def test_order3_counts(regression_args):
    """Test the number of order-3 strobemers of the regression sequence."""
    seq, k, w_min, w_max = regression_args
    assert len(list(MinStrobes(seq, 3, k, w_min, w_max))) == 6


def test_precomputed_minima(regression_args):
    """Test that the window minima match sliding_min over the hashes."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 2, k, w_min, w_max)
    locs, mins = sliding_min(ms.hashes, w_max - w_min + 1)
    assert ms.min_locations.tolist() == locs.tolist()
    assert ms.min_values.tolist() == mins.tolist()


def test_precomputed_arrays_read_only(regression_args):
    """Test that the precomputed arrays cannot be modified."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 2, k, w_min, w_max)
    for arr in (ms.hashes, ms.min_locations, ms.min_values):
        with pytest.raises(ValueError):
            arr[0] = 1


def test_order2_indices(regression_args):
    """Test the strobe positions reported after each step."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 2, k, w_min, w_max)
    assert ms.current_anchor_index() is None
    assert ms.current_indices() == [0, 0, 0]

    for i, expected in enumerate(MIN_O2):
        assert next(ms) == expected
        assert ms.current_anchor_index() == i
        anchor, second, _ = ms.current_indices()
        assert anchor == i
        assert second == MIN_O2_SECOND[i]
        assert i + w_min <= second <= i + w_max


def test_order3_indices(regression_args):
    """Test the three strobe positions of each order-3 strobemer."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 3, k, w_min, w_max)
    seen = []
    for _ in ms:
        seen.append(ms.current_indices())
    assert seen == MIN_O3_INDICES


def test_iter_strobemers(regression_args):
    """Test that positions travel with each hash."""
    seq, k, w_min, w_max = regression_args
    strobes = list(MinStrobes(seq, 3, k, w_min, w_max).iter_strobemers())
    assert [s.hash for s in strobes] == MIN_O3
    assert strobes[0] == Strobemer(MIN_O3[0], 0, 3, 10)
    assert [list(s[1:]) for s in strobes] == MIN_O3_INDICES


def test_exhausted_stays_exhausted(regression_args):
    """Test that further pulls after the end keep raising StopIteration."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 2, k, w_min, w_max)
    list(ms)
    with pytest.raises(StopIteration):
        next(ms)
    assert ms.current_anchor_index() == 10


def test_no_shrink_order2(regression_args):
    """Test that without shrinking iteration stops at the first clipped window."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 2, k, w_min, w_max)
    ms.set_window_shrink(False)
    assert list(ms) == MIN_O2[:9]


def test_no_shrink_order3(regression_args):
    """Test the order-3 count without shrinking."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 3, k, w_min, w_max)
    ms.set_window_shrink(False)
    assert list(ms) == MIN_O3[:4]


def test_shrink_can_resume(regression_args):
    """Test that switching shrinking back on continues from the stopping point."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 2, k, w_min, w_max)
    ms.set_window_shrink(False)
    head = list(ms)
    ms.set_window_shrink(True)
    assert head + list(ms) == MIN_O2


@pytest.mark.parametrize('order', [2, 3])
@pytest.mark.parametrize('w_min, w_max', [(1, 1), (1, 4), (2, 7), (5, 5), (3, 10)])
def test_no_shrink_never_emits_more(order, w_min, w_max):
    """Test that disabling shrinking can only remove strobemers from the end."""
    seq = b'ATCGTACGATGCATGCATGCTGACGGATTACAGT'
    with_shrink = list(MinStrobes(seq, order, 3, w_min, w_max))
    ms = MinStrobes(seq, order, 3, w_min, w_max)
    ms.set_window_shrink(False)
    without = list(ms)
    assert len(without) <= len(with_shrink)
    assert without == with_shrink[:len(without)]


@pytest.mark.parametrize('order', [2, 3])
@pytest.mark.parametrize('k, w_min, w_max', [(3, 3, 5), (1, 1, 1), (10, 1, 2), (2, 7, 9), (4, 2, 12)])
def test_boundary_length(order, k, w_min, w_max):
    """Test exactly one strobemer at the minimum length and an error one base shorter."""
    length = min_sequence_length(order, k, w_min, w_max)
    seq = (b'ACGATCTGGTACCTAG' * 4)[:length]
    assert len(list(MinStrobes(seq, order, k, w_min, w_max))) == 1
    with pytest.raises(SequenceTooShort):
        MinStrobes(seq[:-1], order, k, w_min, w_max)


def test_deterministic(regression_args):
    """Test that identical inputs give identical outputs."""
    seq, k, w_min, w_max = regression_args
    for order in (2, 3):
        first = list(MinStrobes(seq, order, k, w_min, w_max))
        second = list(MinStrobes(bytes(seq), order, k, w_min, w_max))
        assert first == second


def test_str_input_matches_bytes(regression_args):
    """Test that a str sequence is hashed like its ASCII bytes."""
    seq, k, w_min, w_max = regression_args
    assert list(MinStrobes(seq.decode(), 2, k, w_min, w_max)) == MIN_O2


def test_set_prime(regression_args):
    """Test the prime rounding rule and the lower bound."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 3, k, w_min, w_max)
    assert ms.prime == (1 << 20) - 1
    ms.set_prime(300)
    assert ms.prime == 511
    ms.set_prime(256)
    assert ms.prime == 255
    with pytest.raises(PrimeNumberTooSmall):
        ms.set_prime(255)
    assert ms.prime == 255


def test_clipped_second_window_is_masked(fixed_hasher):
    """Test that a clipped order-3 window picks by masked score, a full one by raw minimum."""
    values = [7, 30, 40, 40, 40, 100, 1048570]
    ms = MinStrobes.with_hasher(b'ACGTACG', 3, 1, 1, 3, fixed_hasher(values))

    # full second window [4, 6]: raw minimum 40 at 4
    assert next(ms) == 17
    assert ms.current_indices() == [0, 1, 4]

    # clipped second window [5, 6]: (20 + 1048570) & mask == 14 beats 20 + 100
    assert next(ms) == 20 + 1048570 // 5
    assert ms.current_indices() == [1, 2, 6]

    assert next(ms) == 23 + 1048570 // 5
    assert ms.current_indices() == [2, 3, 6]
    with pytest.raises(StopIteration):
        next(ms)


def test_repr(regression_args):
    """Test the engine repr."""
    seq, k, w_min, w_max = regression_args
    assert repr(MinStrobes(seq, 2, k, w_min, w_max)).startswith('MinStrobes(order=2')


def test_set_prime_above_64_bits(regression_args):
    """Test that a huge prime is clamped to 64 bits before the clipped order-3 window uses it."""
    seq, k, w_min, w_max = regression_args
    ms = MinStrobes(seq, 3, k, w_min, w_max)
    ms.set_prime(2**70)
    assert ms.prime == 2**64 - 1
    assert len(list(ms)) == 6
