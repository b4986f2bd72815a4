from __future__ import annotations

import operator
from typing import Any, Tuple

import numpy as np


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ... (0 and negatives are not powers of two)."""
    n = operator.index(n)
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    n = operator.index(n)
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def prev_power_of_two(n: int) -> int:
    """Largest power of two <= n (0 for n < 1)."""
    n = operator.index(n)
    if n < 1:
        return 0
    return 1 << (n.bit_length() - 1)


def is_pair_array(arr: np.ndarray) -> bool:
    """Heuristic: a 2D array with a trailing axis of 2 holds (re, im) pairs."""
    return arr.ndim == 2 and arr.shape[-1] == 2


def as_complex(samples: Any) -> Tuple[np.ndarray, bool]:
    """Normalize samples into a fresh 1D complex128 array.

    Returns
    -------
    values : ndarray, shape (N,)
        Always a copy; callers may write into it.
    was_pairs : bool
        True if the input was an (N, 2) array of (re, im) pairs.
    """
    arr = np.asarray(samples)
    if arr.dtype == object:
        raise TypeError("samples must be numeric (complex values or (re, im) pairs).")
    if arr.ndim == 0:
        raise TypeError("samples must be a sequence, not a scalar.")

    if is_pair_array(arr):
        if np.iscomplexobj(arr):
            raise TypeError("(re, im) pairs must be real-valued.")
        pairs = arr.astype(float)
        # Assign parts separately; 1j * inf would leak NaN into the real part.
        values = np.empty(pairs.shape[0], dtype=np.complex128)
        values.real = pairs[:, 0]
        values.imag = pairs[:, 1]
        return values, True

    if arr.ndim != 1:
        raise ValueError(
            f"samples must be 1D complex values or (N, 2) pairs, got shape {arr.shape}."
        )
    return np.array(arr, dtype=np.complex128), False


def to_pairs(values: np.ndarray) -> np.ndarray:
    """Split complex values into an (N, 2) float array of (re, im)."""
    values = np.asarray(values, dtype=np.complex128).reshape(-1)
    return np.stack([values.real, values.imag], axis=1)


def as_points(x: Any, y: Any) -> np.ndarray:
    """Pack two 1D sequences into an (N, 2) array of plottable (x, y) points."""
    x_arr = np.asarray(x, dtype=float).reshape(-1)
    y_arr = np.asarray(y, dtype=float).reshape(-1)
    if x_arr.shape != y_arr.shape:
        raise ValueError(
            f"x and y must have the same length, got {x_arr.size} and {y_arr.size}."
        )
    return np.stack([x_arr, y_arr], axis=1)


def safe_float(x: Any) -> float:
    """Convert numpy scalar / 0-d array to python float."""
    if isinstance(x, np.ndarray) and x.shape == ():
        return float(x.item())
    return float(x)
