import pytest

from fishfrenzy.random_generator import RandomGenerator


def test_integers_stay_in_inclusive_range():
    gen = RandomGenerator(1, 3, seed=42)
    values = gen.generate_n(500)
    assert all(isinstance(v, int) for v in values)
    assert set(values) == {1, 2, 3}


def test_floats_stay_in_range():
    gen = RandomGenerator(0.5, 2.5, seed=1)
    values = gen.generate_n(200)
    assert all(isinstance(v, float) and 0.5 <= v <= 2.5 for v in values)


def test_generate_n_length():
    assert len(RandomGenerator(0, 10, seed=3).generate_n(17)) == 17


def test_same_seed_same_sequence():
    first = RandomGenerator(0, 1000, seed=9).generate_n(20)
    second = RandomGenerator(0, 1000, seed=9).generate_n(20)
    assert len(first) == 20
    assert all(isinstance(v, int) and 0 <= v <= 1000 for v in first)
    assert first == second


def test_set_range_changes_output():
    gen = RandomGenerator(0, 1, seed=5)
    gen.set_range(100, 100)
    assert gen.generate_n(5) == [100] * 5


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        RandomGenerator(5, 1)