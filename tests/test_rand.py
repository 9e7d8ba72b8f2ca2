import itertools

import pytest

from labutil.rand import ParkMillerRandom, do_rand


def test_do_rand_from_zero_is_multiplier_minus_one():
    assert do_rand(0) == 16806


def test_minimal_standard_ten_thousandth_value():
    state = 0
    for _ in range(10000):
        state = do_rand(state)
    assert state == 1043618064


def test_state_is_reduced_modulo_before_use():
    assert do_rand(0x7FFFFFFE) == do_rand(0)
    assert do_rand(0x7FFFFFFE + 5) == do_rand(5)


@pytest.mark.parametrize("seed", [1, 31, 7177, 0x7FFFFFFD, 2**40 + 3])
def test_values_stay_in_range(seed):
    gen = ParkMillerRandom(seed)
    for value in itertools.islice(gen, 500):
        assert 0 <= value <= 0x7FFFFFFD


def test_next_matches_do_rand_chain():
    gen = ParkMillerRandom(31)
    state = 31
    for _ in range(50):
        state = do_rand(state)
        assert gen.next() == state


def test_same_seed_gives_same_sequence():
    a = [ParkMillerRandom(7177).next() for _ in range(1)]
    gen1 = ParkMillerRandom(7177)
    gen2 = ParkMillerRandom(7177)
    assert [gen1.next() for _ in range(20)] == [gen2.next() for _ in range(20)]
    assert a[0] == do_rand(7177)


def test_different_seeds_differ():
    gen1 = ParkMillerRandom(31)
    gen2 = ParkMillerRandom(7177)
    assert [gen1.next() for _ in range(10)] != [gen2.next() for _ in range(10)]


def test_default_seed_is_one():
    assert ParkMillerRandom().next() == do_rand(1)