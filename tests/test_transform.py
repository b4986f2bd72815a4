import numpy as np
import pytest

from spectral_synth import TransformLengthError, inverse_transform, transform
from spectral_synth.transform import bin_frequencies, fft_radix2, fft_recursive


def test_impulse_spreads_flat():
    out = transform([(1, 0), (0, 0), (0, 0), (0, 0)])
    assert out.shape == (4, 2)
    assert np.allclose(out, [(1, 0)] * 4)


def test_dc_sequence_concentrates_in_bin_zero():
    out = transform([(1, 0), (1, 0), (1, 0), (1, 0)])
    assert np.allclose(out, [(4, 0), (0, 0), (0, 0), (0, 0)])


def test_length_one_is_unchanged():
    assert np.array_equal(transform([(3.0, -2.0)]), np.array([[3.0, -2.0]]))
    assert np.array_equal(transform(np.array([2 + 1j])), np.array([2 + 1j]))


def test_empty_input():
    assert transform([]).shape == (0,)


def test_non_power_of_two_raises():
    with pytest.raises(TransformLengthError, match="power of two, got 6") as info:
        transform([(1, 0)] * 6)
    assert info.value.length == 6
    assert isinstance(info.value, ValueError)


def test_matches_numpy_fft():
    rng = np.random.default_rng(0)
    z = rng.normal(size=128) + 1j * rng.normal(size=128)
    assert np.allclose(transform(z), np.fft.fft(z))


def test_parseval():
    rng = np.random.default_rng(1)
    z = rng.normal(size=64) + 1j * rng.normal(size=64)
    out = transform(z)
    energy_in = np.sum(np.abs(z) ** 2)
    energy_out = np.sum(np.abs(out) ** 2) / z.size
    assert energy_out == pytest.approx(energy_in, rel=1e-12)


def test_input_is_not_modified():
    z = np.arange(16, dtype=np.complex128)
    before = z.copy()
    transform(z)
    assert np.array_equal(z, before)


def test_inverse_recovers_samples():
    rng = np.random.default_rng(2)
    z = rng.normal(size=32) + 1j * rng.normal(size=32)
    assert np.allclose(inverse_transform(transform(z)), z)


def test_pure_tone_lands_in_its_bin():
    n = 32
    k = np.arange(n)
    z = np.exp(2j * np.pi * 3 * k / n)
    out = transform(z)
    assert np.argmax(np.abs(out)) == 3
    assert out[3] == pytest.approx(n)


def test_iterative_and_recursive_agree():
    rng = np.random.default_rng(3)
    z = rng.normal(size=64) + 1j * rng.normal(size=64)
    iterative = fft_radix2(z.copy())
    recursive = np.asarray(fft_recursive(list(z)))
    assert np.allclose(iterative, recursive, rtol=0, atol=1e-12)


def test_fft_radix2_is_in_place():
    z = np.array([1, 1, 1, 1], dtype=np.complex128)
    out = fft_radix2(z)
    assert out is z
    assert np.allclose(z, [4, 0, 0, 0])


def test_fft_radix2_requires_contiguous_array():
    z = np.arange(16, dtype=np.complex128)[::2]
    with pytest.raises(ValueError, match="contiguous"):
        fft_radix2(z)


def test_bin_frequencies():
    assert np.allclose(bin_frequencies(8, 0.5, angular=False), np.fft.fftfreq(8, 0.5))
    assert np.allclose(bin_frequencies(8, 0.5), 2 * np.pi * np.fft.fftfreq(8, 0.5))
    assert bin_frequencies(0, 1.0).size == 0
    with pytest.raises(ValueError, match="spacing"):
        bin_frequencies(8, 0.0)


@pytest.mark.parametrize("imag", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_imaginary_part_keeps_real_part(imag):
    out = transform([(1.0, imag)])
    assert out[0, 0] == 1.0
    assert np.array_equal(out, np.array([[1.0, imag]]), equal_nan=True)


def test_non_finite_pairs_propagate_through_butterflies():
    out = transform([(2.0, float("nan")), (0.0, 0.0)])
    assert np.all(np.isnan(out[:, 1]))
    assert np.array_equal(out[:, 0], [2.0, 2.0])
