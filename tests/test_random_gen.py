import statistics

import pytest
from hypothesis import given
from hypothesis import strategies as st

from frechetkit.random_gen import (
    CustomProbabilityGenerator,
    GaussRandomGenerator,
    UniformRandomGenerator,
)


def test_uniform_in_bounds():
    gen = UniformRandomGenerator(-2.0, 3.0, seed=1)
    values = gen.get(1000)
    assert len(values) == 1000
    assert all(-2.0 <= v < 3.0 for v in values)


def test_uniform_default_unit_interval():
    gen = UniformRandomGenerator(seed=5)
    value = gen.get()
    assert 0.0 <= value < 1.0


@given(st.integers(min_value=0, max_value=2**32))
def test_uniform_seed_reproducible(seed):
    first = UniformRandomGenerator(seed=seed).get(5)
    second = UniformRandomGenerator(seed=seed).get(5)
    assert len(first) == 5
    assert all(0.0 <= v < 1.0 for v in first)
    assert first == second


def test_gauss_reproducible_and_centered():
    a = GaussRandomGenerator(10.0, 1.0, seed=3).get(2000)
    b = GaussRandomGenerator(10.0, 1.0, seed=3).get(2000)
    assert a == b
    assert statistics.mean(a) == pytest.approx(10.0, abs=0.2)


def test_gauss_single_value_reproducible():
    first = GaussRandomGenerator(0.0, 2.0, seed=9).get()
    second = GaussRandomGenerator(0.0, 2.0, seed=9).get()
    assert -40.0 < first < 40.0
    assert first == second


def test_custom_certain_last_index():
    gen = CustomProbabilityGenerator([0.0, 1.0], seed=2)
    assert gen.get(100) == [1] * 100


def test_custom_single_probability():
    gen = CustomProbabilityGenerator([1.0], seed=4)
    assert gen.get() == 0


def test_custom_indices_in_range():
    gen = CustomProbabilityGenerator([0.25, 0.25, 0.5], seed=7)
    values = gen.get(500)
    assert set(values) <= {0, 1, 2}
    assert len(set(values)) == 3


def test_custom_empty_raises():
    gen = CustomProbabilityGenerator([], seed=0)
    with pytest.raises(ValueError):
        gen.get()