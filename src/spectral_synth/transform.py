from __future__ import annotations

from typing import Any

import numpy as np

from .backends import get_backend
from .backends.radix2 import fft_radix2, fft_recursive
from .util import as_complex, is_power_of_two, to_pairs

__all__ = [
    "TransformLengthError",
    "transform",
    "inverse_transform",
    "bin_frequencies",
    "fft_radix2",
    "fft_recursive",
]


class TransformLengthError(ValueError):
    """Transform input whose length is not a power of two."""

    def __init__(self, length: int):
        self.length = int(length)
        super().__init__(
            f"transform length must be a power of two, got {self.length}. "
            "Pad or truncate the samples (see compute(length_policy=...))."
        )


def check_length(n: int) -> None:
    """Raise TransformLengthError unless n <= 1 or n is a power of two."""
    if n > 1 and not is_power_of_two(n):
        raise TransformLengthError(n)


def transform(samples: Any, *, backend: str = "radix2", inverse: bool = False) -> Any:
    """Discrete Fourier transform of a power-of-two-length sequence.

    Parameters
    ----------
    samples : array-like
        Either 1D real/complex values, or an (N, 2) array of (re, im) pairs.
        Never modified.
    backend : str
        Name from ``spectral_synth.backends.AVAILABLE_BACKENDS``. The default
        "radix2" is the in-place iterative Cooley–Tukey implementation.
    inverse : bool
        Compute the inverse DFT (scaled by 1/N) instead.

    Returns
    -------
    ndarray
        Same form as the input: (N, 2) float pairs for pair input, otherwise a
        complex array. Bin k is in standard DFT order (0..N/2-1 positive, then
        negative frequencies).

    Raises
    ------
    TransformLengthError
        If N > 1 and N is not a power of two.
    """
    values, was_pairs = as_complex(samples)
    n = values.shape[0]
    check_length(n)

    impl = get_backend(backend)
    if n <= 1:
        out = values
    elif inverse:
        out = np.conj(impl.forward(np.conj(values))) / n
    else:
        out = impl.forward(values)

    return to_pairs(out) if was_pairs else np.asarray(out, dtype=np.complex128)


def inverse_transform(spectrum: Any, *, backend: str = "radix2") -> Any:
    """Inverse of :func:`transform`; same input forms and length rule."""
    return transform(spectrum, backend=backend, inverse=True)


def bin_frequencies(n: int, spacing: float, *, angular: bool = True) -> np.ndarray:
    """Frequency of each DFT bin for n samples taken ``spacing`` apart.

    angular=True returns angular frequencies (2π × cycles per unit), which is
    the scale PeriodicComponent.frequency uses: a component with frequency w
    peaks in the bin whose value is closest to w.
    """
    if n < 1:
        return np.empty(0, dtype=float)
    if not spacing > 0:
        raise ValueError(f"spacing must be > 0, got {spacing}")
    freqs = np.fft.fftfreq(int(n), d=float(spacing))
    return 2.0 * np.pi * freqs if angular else freqs
