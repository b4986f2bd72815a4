from __future__ import annotations

import math
from typing import List

import numpy as np


def bit_reversal_permutation(n: int) -> np.ndarray:
    """Indices 0..n-1 with their log2(n)-bit binary representation reversed."""
    bits = n.bit_length() - 1
    idx = np.arange(n, dtype=np.intp)
    rev = np.zeros(n, dtype=np.intp)
    for b in range(bits):
        rev |= ((idx >> b) & 1) << (bits - 1 - b)
    return rev


def twiddles(size: int) -> np.ndarray:
    """e^{-2πik/size} for k in [0, size/2), as cos(θ) - i·sin(θ)."""
    theta = 2.0 * np.pi * np.arange(size // 2, dtype=float) / size
    return np.cos(theta) - 1j * np.sin(theta)


def fft_radix2(values: np.ndarray) -> np.ndarray:
    """In-place iterative radix-2 decimation-in-time FFT.

    ``values`` must be a contiguous 1D complex array whose length is a power of
    two; it is overwritten with its DFT and returned.

    Strategy:
    - reorder by bit-reversed index, so every recursive even/odd split of the
      textbook algorithm becomes a contiguous block,
    - then combine blocks of size 2, 4, ..., n with butterflies
      ``(e + t, e - t)`` where ``t = w_k * o``. Each stage is vectorised over
      all blocks via a (n/size, size) view.
    """
    if values.ndim != 1 or not values.flags.c_contiguous:
        raise ValueError("fft_radix2 requires a contiguous 1D array.")
    n = values.shape[0]
    if n <= 1:
        return values

    values[:] = values[bit_reversal_permutation(n)]

    size = 2
    while size <= n:
        half = size // 2
        blocks = values.reshape(n // size, size)  # view: writes land in values
        even = blocks[:, :half].copy()
        t = twiddles(size) * blocks[:, half:]
        blocks[:, :half] = even + t
        blocks[:, half:] = even - t
        size *= 2
    return values


def fft_recursive(values: List[complex]) -> List[complex]:
    """Recursive radix-2 FFT on a list; returns a new list.

    Readable form of the algorithm: split into even/odd indices, transform
    both halves, and recombine with twiddle factors. Allocates two half-length
    lists per level.
    """
    n = len(values)
    if n <= 1:
        return list(values)

    even = fft_recursive(values[0::2])
    odd = fft_recursive(values[1::2])

    out = [0j] * n
    half = n // 2
    for k in range(half):
        theta = 2.0 * math.pi * k / n
        t = complex(math.cos(theta), -math.sin(theta)) * odd[k]
        out[k] = even[k] + t
        out[k + half] = even[k] - t
    return out


class Radix2Backend:
    name = "radix2"

    def forward(self, values: np.ndarray) -> np.ndarray:
        work = np.array(values, dtype=np.complex128)  # contiguous private copy
        return fft_radix2(work)


class RecursiveRadix2Backend:
    name = "radix2.recursive"

    def forward(self, values: np.ndarray) -> np.ndarray:
        seq = [complex(v) for v in np.asarray(values, dtype=np.complex128)]
        return np.asarray(fft_recursive(seq), dtype=np.complex128)
