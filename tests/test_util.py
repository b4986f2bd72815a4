import numpy as np
import pytest

from spectral_synth.util import (
    as_complex,
    as_points,
    is_power_of_two,
    next_power_of_two,
    prev_power_of_two,
    to_pairs,
)


@pytest.mark.parametrize(
    "n, expected",
    [(0, False), (1, True), (2, True), (6, False), (1024, True), (1000, False), (-4, False)],
)
def test_is_power_of_two(n, expected):
    assert is_power_of_two(n) is expected


@pytest.mark.parametrize("n, up, down", [(0, 1, 0), (1, 1, 1), (5, 8, 4), (8, 8, 8), (1000, 1024, 512)])
def test_power_of_two_rounding(n, up, down):
    assert next_power_of_two(n) == up
    assert prev_power_of_two(n) == down


def test_as_complex_pairs_and_values():
    values, was_pairs = as_complex([(1.0, 2.0), (3.0, -4.0)])
    assert was_pairs
    assert np.array_equal(values, np.array([1 + 2j, 3 - 4j]))

    values, was_pairs = as_complex([1.0, 2.0, 3.0])
    assert not was_pairs
    assert values.dtype == np.complex128


def test_as_complex_copies_input():
    src = np.array([1 + 0j, 2 + 0j])
    values, _ = as_complex(src)
    values[0] = 99
    assert src[0] == 1


def test_as_complex_rejects_bad_shapes():
    with pytest.raises(TypeError, match="scalar"):
        as_complex(1.0)
    with pytest.raises(ValueError, match="shape"):
        as_complex(np.zeros((2, 3)))


def test_to_pairs_and_as_points():
    assert np.array_equal(to_pairs([1 + 2j]), np.array([[1.0, 2.0]]))
    assert as_points([0, 1], [2, 3]).shape == (2, 2)
    with pytest.raises(ValueError, match="same length"):
        as_points([0, 1], [2])


def test_as_complex_pairs_keep_non_finite_parts_separate():
    values, _ = as_complex([(1.0, float("inf")), (float("nan"), 3.0)])
    assert values[0].real == 1.0
    assert np.isinf(values[0].imag)
    assert np.isnan(values[1].real)
    assert values[1].imag == 3.0
