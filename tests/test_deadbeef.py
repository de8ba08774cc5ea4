import pytest

from pixelseek.deadbeef import DEADBEEF_MAX, DeadbeefRandom, generate_seed


def test_first_value_from_zero_seed():
    assert DeadbeefRandom(0).rand() == 0xDEADBEEF


def test_same_seed_same_sequence():
    a = DeadbeefRandom(12345)
    b = DeadbeefRandom(12345)
    assert [a.rand() for _ in range(50)] == [b.rand() for _ in range(50)]


def test_different_seeds_diverge():
    a = DeadbeefRandom(1)
    b = DeadbeefRandom(2)
    assert [a.rand() for _ in range(10)] != [b.rand() for _ in range(10)]


def test_reseed_restarts_sequence():
    gen = DeadbeefRandom(99)
    first = [gen.rand() for _ in range(20)]
    gen.seed(99)
    assert [gen.rand() for _ in range(20)] == first


def test_seed_is_truncated_to_32_bits():
    a = DeadbeefRandom(7)
    b = DeadbeefRandom(7 + (1 << 32))
    assert [a.rand() for _ in range(5)] == [b.rand() for _ in range(5)]


def test_rand_stays_in_range():
    gen = DeadbeefRandom(424242)
    assert all(0 <= gen.rand() <= DEADBEEF_MAX for _ in range(1000))


@pytest.mark.parametrize("a,b", [(0.0, 1.0), (5.0, 500.0), (1.0, 3.0), (0.0, 62.5)])
def test_uniform_in_half_open_range(a, b):
    gen = DeadbeefRandom(31337)
    assert all(a <= gen.uniform(a, b) < b for _ in range(1000))


def test_randrange_in_range():
    gen = DeadbeefRandom(2024)
    values = {gen.randrange(0, 10) for _ in range(2000)}
    assert values <= set(range(10))
    assert len(values) > 1


def test_generate_seed_is_32_bit():
    seed = generate_seed()
    assert 0 <= seed <= DEADBEEF_MAX