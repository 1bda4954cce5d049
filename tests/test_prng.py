import itertools

import pytest

from chesscore.prng import PRNG, mul_hi64

MASK64 = (1 << 64) - 1


def test_same_seed_same_sequence():
    a = PRNG(8977)
    b = PRNG(8977)
    assert [a.rand64() for _ in range(50)] == [b.rand64() for _ in range(50)]


def test_different_seeds_differ():
    a = PRNG(728)
    b = PRNG(10316)
    assert [a.rand64() for _ in range(10)] != [b.rand64() for _ in range(10)]


def test_outputs_are_64_bit_and_non_zero():
    rng = PRNG(44560)
    for _ in range(1000):
        value = rng.rand64()
        assert 0 < value <= MASK64


def test_iteration_matches_rand64():
    a = PRNG(54343)
    b = PRNG(54343)
    assert list(itertools.islice(a, 20)) == [b.rand64() for _ in range(20)]


def test_sparse_rand_is_and_of_three_draws():
    a = PRNG(38998)
    b = PRNG(38998)
    for _ in range(20):
        expected = b.rand64() & b.rand64() & b.rand64()
        assert a.sparse_rand() == expected


def test_sparse_rand_has_few_bits():
    rng = PRNG(5731)
    draws = [rng.sparse_rand() for _ in range(2000)]
    average = sum(bin(d).count("1") for d in draws) / len(draws)
    assert 4 < average < 12


@pytest.mark.parametrize("seed", [0, -1, 1 << 64])
def test_invalid_seed_raises(seed):
    with pytest.raises(ValueError):
        PRNG(seed)


def test_mul_hi64_max_values():
    assert mul_hi64(MASK64, MASK64) == MASK64 - 1


def test_mul_hi64_small_product_is_zero():
    assert mul_hi64(12345, 67890) == 0


@pytest.mark.parametrize("k", [1, 8, 32, 63])
def test_mul_hi64_power_of_two(k):
    a = 0xDEADBEEFCAFEBABE
    assert mul_hi64(a, 1 << k) == a >> (64 - k)


def test_mul_hi64_is_commutative():
    rng = PRNG(95205)
    for _ in range(50):
        a, b = rng.rand64(), rng.rand64()
        assert mul_hi64(a, b) == mul_hi64(b, a)