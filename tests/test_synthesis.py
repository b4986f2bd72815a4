import numpy as np
import pytest

from spectral_synth import PeriodicComponent, SamplingError, synthesize
from spectral_synth.synthesis import sample_positions


def _two_components():
    a = PeriodicComponent.sine(amplitude=1.3, frequency=2.0, offset=0.1)
    b = PeriodicComponent.cosine(amplitude=-0.7, frequency=5.5, offset=-0.4)
    return a, b


def test_length_for_default_grid():
    out = synthesize([PeriodicComponent()], 1000, 3.14)
    assert out.shape[1] == 2
    assert out.shape[0] in {999, 1000}
    # positions are i * step, so the count is exact
    assert out.shape[0] == 1000


def test_accumulated_positions_stay_near_sample_count():
    x = sample_positions(1000, 3.14, mode="accumulate")
    assert x.size in {999, 1000, 1001}
    assert np.all(np.diff(x) > 0)
    assert x[-1] < 3.14


def test_positions_are_multiples_of_step_and_half_open():
    x = sample_positions(8, 2.0)
    assert np.array_equal(x, np.arange(8) * 0.25)
    assert x[-1] < 2.0


def test_empty_components_give_zero_signal():
    out = synthesize([], 64, 3.14)
    assert out.shape == (64, 2)
    assert np.all(out[:, 1] == 0.0)


def test_superposition():
    a, b = _two_components()
    ya = synthesize([a], 256, 6.0)[:, 1]
    yb = synthesize([b], 256, 6.0)[:, 1]
    yab = synthesize([a, b], 256, 6.0)[:, 1]
    assert np.array_equal(ya + yb, yab)


def test_values_match_closed_form():
    a, b = _two_components()
    out = synthesize([a, b], 128, 4.0)
    x = out[:, 0]
    expected = (np.sin(x * 2.0) * 1.3 + 0.1) + (np.cos(x * 5.5) * -0.7 - 0.4)
    assert np.allclose(out[:, 1], expected)


@pytest.mark.parametrize("domain_range", [0.0, -1.0, float("nan")])
def test_non_positive_range_is_empty(domain_range):
    out = synthesize([PeriodicComponent()], 16, domain_range)
    assert out.shape == (0, 2)


@pytest.mark.parametrize("count", [0, -3])
def test_non_positive_sample_count_fails_fast(count):
    with pytest.raises(SamplingError, match="sample_count must be >= 1"):
        synthesize([PeriodicComponent()], count, 3.14)


def test_sample_count_must_be_integer():
    with pytest.raises(TypeError, match="integer"):
        synthesize([], 10.5, 3.14)


def test_infinite_range_rejected():
    with pytest.raises(SamplingError, match="finite"):
        synthesize([], 16, float("inf"))


def test_unknown_positions_mode():
    with pytest.raises(ValueError, match="positions mode"):
        sample_positions(16, 1.0, mode="random")


def test_extreme_parameters_propagate_non_finite_values():
    out = synthesize([PeriodicComponent(amplitude=float("inf"))], 8, 1.0)
    assert not np.all(np.isfinite(out[:, 1]))


def test_synthesize_does_not_mutate_components():
    comps = [PeriodicComponent.sine(amplitude=2.0)]
    synthesize(comps, 32, 1.0)
    assert comps[0].amplitude == 2.0
    assert len(comps) == 1
