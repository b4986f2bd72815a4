from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Tuple

import numpy as np

from .util import safe_float


class WaveKind(Enum):
    """Elementary periodic functions a component can be built from."""

    SINE = "sin"
    COSINE = "cos"

    def __str__(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def coerce(cls, kind: Any) -> "WaveKind":
        """Accept a WaveKind or one of 'sin', 'sine', 'cos', 'cosine'."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return _ALIASES[kind.strip().lower()]
            except KeyError:
                pass
        raise ValueError(
            f"Unknown wave kind {kind!r}. Available: {tuple(_ALIASES.keys())}"
        )


_DISPLAY_NAMES: Dict[WaveKind, str] = {
    WaveKind.SINE: "Sin",
    WaveKind.COSINE: "Cos",
}

_ALIASES: Dict[str, WaveKind] = {
    "sin": WaveKind.SINE,
    "sine": WaveKind.SINE,
    "cos": WaveKind.COSINE,
    "cosine": WaveKind.COSINE,
}

_WAVE_FUNCTIONS: Dict[WaveKind, Callable[[np.ndarray], np.ndarray]] = {
    WaveKind.SINE: np.sin,
    WaveKind.COSINE: np.cos,
}


def wave_function(kind: Any) -> Callable[[np.ndarray], np.ndarray]:
    """Return the elementary function (np.sin / np.cos) for a wave kind."""
    return _WAVE_FUNCTIONS[WaveKind.coerce(kind)]


@dataclass
class PeriodicComponent:
    """One wave of the composed signal.

    Evaluates to ``f(x * frequency) * amplitude + offset`` where ``f`` is sin or
    cos. ``frequency`` is an angular scale on x, not a frequency in Hz.

    Instances are owned (and edited in place) by the caller; the synthesis
    pipeline only reads them through :func:`snapshot`.
    """

    kind: WaveKind = WaveKind.SINE
    amplitude: float = 1.0
    frequency: float = 1.0
    offset: float = 0.0

    def __post_init__(self) -> None:
        self.kind = WaveKind.coerce(self.kind)

    @staticmethod
    def sine(
        amplitude: float = 1.0, frequency: float = 1.0, offset: float = 0.0
    ) -> "PeriodicComponent":
        return PeriodicComponent(WaveKind.SINE, amplitude, frequency, offset)

    @staticmethod
    def cosine(
        amplitude: float = 1.0, frequency: float = 1.0, offset: float = 0.0
    ) -> "PeriodicComponent":
        return PeriodicComponent(WaveKind.COSINE, amplitude, frequency, offset)

    def evaluate(self, x: Any) -> np.ndarray:
        """Evaluate the component at positions x (scalar or array)."""
        f = wave_function(self.kind)
        x_arr = np.asarray(x, dtype=float)
        return f(x_arr * self.frequency) * self.amplitude + self.offset

    def __str__(self) -> str:
        return (
            f"{self.amplitude:g}*{self.kind}({self.frequency:g}x)"
            f" + {self.offset:g}"
        )


def snapshot(components: Iterable[PeriodicComponent]) -> Tuple[PeriodicComponent, ...]:
    """Copy a caller-owned component collection into an independent tuple.

    Numeric fields are converted to python floats so later edits to the
    caller's objects (or to numpy scalars they hold) cannot leak into a
    computation that is already running.
    """
    if components is None:
        return ()
    if isinstance(components, PeriodicComponent):
        raise TypeError("components must be a collection of PeriodicComponent, not a single one.")

    out = []
    for c in components:
        if not isinstance(c, PeriodicComponent):
            raise TypeError(
                f"components must contain PeriodicComponent instances, got {type(c).__name__}."
            )
        out.append(
            replace(
                c,
                amplitude=safe_float(c.amplitude),
                frequency=safe_float(c.frequency),
                offset=safe_float(c.offset),
            )
        )
    return tuple(out)
