from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple
from warnings import warn

import numpy as np

from .components import PeriodicComponent, snapshot


def _finite_points(points: np.ndarray, where: str) -> np.ndarray:
    """Drop rows containing NaN/Inf, warning once if any were dropped."""
    points = np.asarray(points, dtype=float)
    mask = np.all(np.isfinite(points), axis=1)
    dropped = int(points.shape[0] - np.count_nonzero(mask))
    if dropped:
        warn(f"{where}: skipped {dropped} non-finite point(s).", UserWarning)
        return points[mask]
    return points


def _get_ax(ax: Optional[Any]) -> Tuple[Any, Any]:
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure
    return fig, ax


def plot_components(
    *,
    ax: Optional[Any] = None,
    components: Iterable[PeriodicComponent],
    domain: Tuple[float, float] = (0.0, 3.14),
    npoints: int = 10000,
    line_kwargs: Optional[Mapping[str, Any]] = None,
    legend: bool = True,
) -> Tuple[Any, Any]:
    """Draw each component as its own line over ``domain``."""
    fig, ax = _get_ax(ax)
    lo, hi = float(domain[0]), float(domain[1])
    xg = np.linspace(lo, hi, int(npoints))

    for c in snapshot(components):
        kw = dict(line_kwargs or {})
        kw.setdefault("label", str(c))
        pts = _finite_points(np.stack([xg, c.evaluate(xg)], axis=1), "plot_components")
        ax.plot(pts[:, 0], pts[:, 1], **kw)

    if legend and ax.get_legend_handles_labels()[0]:
        ax.legend(loc="upper right", fontsize=8)
    return fig, ax


def plot_signal(
    *,
    ax: Optional[Any] = None,
    result: Any,
    line_kwargs: Optional[Mapping[str, Any]] = None,
) -> Tuple[Any, Any]:
    """Draw the combined time-domain signal of a SignalResult."""
    fig, ax = _get_ax(ax)
    line_kwargs = dict(line_kwargs or {})
    line_kwargs.setdefault("label", "signal")

    pts = _finite_points(result.time_points(), "plot_signal")
    ax.plot(pts[:, 0], pts[:, 1], **line_kwargs)
    return fig, ax


def plot_spectrum(
    *,
    ax: Optional[Any] = None,
    result: Any,
    part: str = "real",
    axis: str = "position",
    line_kwargs: Optional[Mapping[str, Any]] = None,
) -> Tuple[Any, Any]:
    """Draw the spectrum of a SignalResult.

    Defaults reproduce the classic display: real part of each bin plotted
    against the sample positions. Use part="magnitude", axis="frequency" for a
    conventional magnitude spectrum.
    """
    fig, ax = _get_ax(ax)
    line_kwargs = dict(line_kwargs or {})
    line_kwargs.setdefault("label", f"spectrum ({part})")

    pts = _finite_points(result.spectrum_points(part=part, axis=axis), "plot_spectrum")
    if axis == "frequency" and pts.size:
        # fftfreq order wraps to negative frequencies; sort for a clean line.
        pts = pts[np.argsort(pts[:, 0], kind="stable")]
    ax.plot(pts[:, 0], pts[:, 1], **line_kwargs)
    return fig, ax


def plot_panels(
    result: Any,
    *,
    components: Optional[Sequence[PeriodicComponent]] = None,
    part: str = "real",
    axis: str = "position",
    figsize: Tuple[float, float] = (8.0, 9.0),
    titles: bool = True,
) -> Tuple[Any, Any]:
    """Three stacked panels: components, combined signal, spectrum.

    The panels share the x axis when the spectrum is drawn against sample
    positions, so zooming one zooms all of them. With components=None the
    first panel is left empty.
    """
    import matplotlib.pyplot as plt

    sharex = "all" if axis == "position" else "none"
    fig, axes = plt.subplots(3, 1, figsize=figsize, sharex=sharex)
    ax_c, ax_s, ax_f = axes

    hi = float(result.x[-1] + result.step) if result.x.size else 1.0
    if components is not None:
        plot_components(ax=ax_c, components=components, domain=(0.0, hi))
    plot_signal(ax=ax_s, result=result)
    plot_spectrum(ax=ax_f, result=result, part=part, axis=axis)

    if titles:
        ax_c.set_title("Components")
        ax_s.set_title("Combined wave")
        ax_f.set_title("Frequency plot")
    fig.tight_layout()
    return fig, axes
