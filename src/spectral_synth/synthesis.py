from __future__ import annotations

import math
import operator
from typing import Any, Iterable, Literal

import numpy as np

from .components import PeriodicComponent, snapshot
from .util import as_points

PositionMode = Literal["analytic", "accumulate"]


class SamplingError(ValueError):
    """Sampling parameters that cannot produce a finite, well-defined grid."""


def check_sample_count(sample_count: Any) -> int:
    """Return sample_count as an int >= 1 or raise."""
    try:
        n = operator.index(sample_count)
    except TypeError as e:
        raise TypeError(
            f"sample_count must be an integer, got {type(sample_count).__name__}."
        ) from e
    if n < 1:
        raise SamplingError(f"sample_count must be >= 1, got {n}.")
    return n


def sample_positions(
    sample_count: int, domain_range: float, mode: PositionMode = "analytic"
) -> np.ndarray:
    """Sample positions over the half-open domain [0, domain_range).

    The step is ``domain_range / sample_count``.

    mode="analytic" (default) computes ``x_i = i * step`` so the number of
    samples is exactly ``sample_count``. mode="accumulate" steps by repeated
    addition, which may yield one sample more or less near the boundary.
    """
    n = check_sample_count(sample_count)
    r = float(domain_range)
    if not r > 0.0:
        return np.empty(0, dtype=float)
    if math.isinf(r):
        raise SamplingError("domain_range must be finite.")

    step = r / n

    if mode == "analytic":
        x = np.arange(n, dtype=float) * step
        return x[x < r]

    if mode == "accumulate":
        out = []
        pos = 0.0
        # n + 1 bounds the loop even if pos + step stops advancing.
        while pos < r and len(out) <= n:
            out.append(pos)
            pos += step
        return np.asarray(out, dtype=float)

    raise ValueError(f"Unknown positions mode {mode!r}. Use 'analytic' or 'accumulate'.")


def synthesize(
    components: Iterable[PeriodicComponent],
    sample_count: int,
    domain_range: float,
    *,
    positions: PositionMode = "analytic",
) -> np.ndarray:
    """Sample the sum of all components over [0, domain_range).

    Returns
    -------
    ndarray, shape (N, 2)
        Rows of (x, y) in ascending x. An empty component list gives y == 0
        everywhere; a non-positive domain_range gives an empty (0, 2) array.

    Raises
    ------
    SamplingError
        If sample_count < 1 or domain_range is infinite.
    """
    comps = snapshot(components)
    x = sample_positions(sample_count, domain_range, positions)
    y = np.zeros_like(x)
    for c in comps:
        y += c.evaluate(x)
    return as_points(x, y)
