from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Tuple
from warnings import warn

import numpy as np

from .components import PeriodicComponent, snapshot
from .inputs import SamplingParams
from .synthesis import PositionMode, SamplingError, synthesize
from .transform import bin_frequencies, transform
from .util import as_points, next_power_of_two, prev_power_of_two

LengthPolicy = Literal["strict", "pad", "truncate"]
SpectrumPart = Literal["real", "imag", "magnitude"]
SpectrumAxis = Literal["position", "bin", "frequency"]


@dataclass(frozen=True)
class SignalResult:
    """Time-domain samples plus their spectrum for one compute() call."""

    x: np.ndarray  # sample positions, shape (N,)
    y: np.ndarray  # real samples, shape (N,)
    spectrum: np.ndarray  # complex DFT bins, shape (M,); M != N if padded/truncated
    step: float = 0.0
    backend: str = ""
    padded: int = 0  # zeros appended before the transform
    truncated: int = 0  # samples dropped before the transform

    @property
    def is_empty(self) -> bool:
        return self.x.size == 0

    def time_points(self) -> np.ndarray:
        """(N, 2) array of (x, y) for a line plot of the signal."""
        return as_points(self.x, self.y)

    def magnitude(self) -> np.ndarray:
        return np.abs(self.spectrum)

    def frequencies(self, *, angular: bool = True) -> np.ndarray:
        """Frequency of each spectrum bin (see transform.bin_frequencies)."""
        if self.spectrum.size == 0:
            return np.empty(0, dtype=float)
        return bin_frequencies(self.spectrum.size, self.step, angular=angular)

    def spectrum_points(
        self, part: SpectrumPart = "real", axis: SpectrumAxis = "position"
    ) -> np.ndarray:
        """(M, 2) array of plottable spectrum points.

        part selects the y value ("real", "imag" or "magnitude"); axis selects
        x: "position" pairs bin k with the k-th sample position (k * step),
        "bin" uses k itself and "frequency" uses the angular bin frequency.
        """
        if part == "real":
            yv = self.spectrum.real
        elif part == "imag":
            yv = self.spectrum.imag
        elif part == "magnitude":
            yv = np.abs(self.spectrum)
        else:
            raise ValueError(f"Unknown spectrum part {part!r}.")

        m = self.spectrum.size
        if axis == "position":
            xv = np.arange(m, dtype=float) * self.step
        elif axis == "bin":
            xv = np.arange(m, dtype=float)
        elif axis == "frequency":
            xv = self.frequencies()
        else:
            raise ValueError(f"Unknown spectrum axis {axis!r}.")
        return as_points(xv, yv)


def fit_length(values: np.ndarray, policy: LengthPolicy) -> Tuple[np.ndarray, int, int]:
    """Apply a length policy; returns (values, padded, truncated)."""
    if policy not in ("strict", "pad", "truncate"):
        raise ValueError(f"Unknown length_policy {policy!r}.")
    n = values.shape[0]
    if policy == "strict" or n <= 1:
        return values, 0, 0
    if policy == "pad":
        m = next_power_of_two(n)
        if m == n:
            return values, 0, 0
        out = np.zeros(m, dtype=np.complex128)
        out[:n] = values
        return out, m - n, 0
    m = prev_power_of_two(n)
    return values[:m], 0, n - m


def _empty_result(step: float, backend: str) -> SignalResult:
    return SignalResult(
        x=np.empty(0, dtype=float),
        y=np.empty(0, dtype=float),
        spectrum=np.empty(0, dtype=np.complex128),
        step=step,
        backend=backend,
    )


def compute(
    components: Iterable[PeriodicComponent],
    sample_count: Optional[int] = None,
    domain_range: Optional[float] = None,
    *,
    sampling: Optional[SamplingParams] = None,
    backend: str = "radix2",
    length_policy: LengthPolicy = "strict",
    positions: Optional[PositionMode] = None,
) -> SignalResult:
    """Synthesize the composed signal and its spectrum in one call.

    Pass either sample_count/domain_range or a SamplingParams via sampling=;
    explicit numbers override the corresponding sampling fields.

    Invalid sampling parameters (sample_count < 1, infinite domain_range) are
    recovered: a UserWarning is emitted and an empty result is returned.
    A synthesized length that is not a power of two raises
    TransformLengthError under length_policy="strict"; "pad" zero-pads to the
    next power of two and "truncate" drops samples down to the previous one.
    """
    params = sampling if sampling is not None else SamplingParams()
    if sample_count is not None:
        params = params.with_(sample_count=sample_count)
    if domain_range is not None:
        params = params.with_(domain_range=domain_range)
    if positions is not None:
        params = params.with_(positions=positions)

    comps = snapshot(components)

    try:
        step = params.step
        samples = synthesize(
            comps, params.sample_count, params.domain_range, positions=params.positions
        )
    except SamplingError as exc:
        warn(f"compute: nothing to sample ({exc}); returning an empty result.", UserWarning)
        return _empty_result(0.0, backend)

    x = samples[:, 0]
    y = samples[:, 1]

    promoted = y.astype(np.complex128)  # imag = 0; private copy of y
    promoted, padded, truncated = fit_length(promoted, length_policy)
    spectrum = transform(promoted, backend=backend)

    return SignalResult(
        x=x,
        y=y,
        spectrum=spectrum,
        step=step,
        backend=backend,
        padded=padded,
        truncated=truncated,
    )
