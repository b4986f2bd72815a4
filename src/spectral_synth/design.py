from __future__ import annotations

from typing import Any, Iterable, List, Optional

import numpy as np

from .components import PeriodicComponent, WaveKind
from .inputs import SamplingParams
from .pipeline import SignalResult, compute
from .synthesis import synthesize


class SignalDesign:
    """Editable list of periodic components plus the sampling settings.

    This is the caller side of the pipeline: components are added, edited in
    place and removed here, and every synthesize()/compute() call works on a
    snapshot of the list at that moment.
    """

    def __init__(
        self,
        components: Optional[Iterable[PeriodicComponent]] = None,
        sampling: Optional[SamplingParams] = None,
    ):
        self.components: List[PeriodicComponent] = list(components or [])
        self.sampling: SamplingParams = sampling if sampling is not None else SamplingParams()

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> PeriodicComponent:
        return self.components[index]

    def __iter__(self):
        return iter(self.components)

    def __repr__(self) -> str:
        parts = " + ".join(str(c) for c in self.components) or "0"
        return f"SignalDesign({parts}; {self.sampling})"

    # ---- editing ---------------------------------------------------------
    def add(
        self,
        kind: Any = WaveKind.SINE,
        amplitude: float = 1.0,
        frequency: float = 1.0,
        offset: float = 0.0,
    ) -> PeriodicComponent:
        """Append a component (defaults: unit sine) and return it for editing."""
        comp = PeriodicComponent(
            kind=WaveKind.coerce(kind),
            amplitude=float(amplitude),
            frequency=float(frequency),
            offset=float(offset),
        )
        self.components.append(comp)
        return comp

    def remove(self, index: int) -> PeriodicComponent:
        """Remove and return the component at index."""
        return self.components.pop(index)

    def clear(self) -> None:
        self.components.clear()

    def with_sampling(self, **changes: Any) -> "SignalDesign":
        """Update sampling fields in place; returns self for chaining."""
        self.sampling = self.sampling.with_(**changes)
        return self

    # ---- evaluation ------------------------------------------------------
    def synthesize(self) -> np.ndarray:
        """(N, 2) array of (x, y) samples of the current design."""
        s = self.sampling
        return synthesize(
            self.components, s.sample_count, s.domain_range, positions=s.positions
        )

    def compute(self, **kwargs: Any) -> SignalResult:
        """Run the full pipeline; kwargs are forwarded to pipeline.compute()."""
        kwargs.setdefault("sampling", self.sampling)
        return compute(self.components, **kwargs)

    def plot(self, *, compute_options: Optional[dict] = None, **kwargs: Any):
        """Compute and draw the three standard panels (see plotting.plot_panels)."""
        from .plotting import plot_panels

        result = self.compute(**dict(compute_options or {}))
        return plot_panels(result, components=self.components, **kwargs)
