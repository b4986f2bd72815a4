from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .synthesis import PositionMode, check_sample_count


@dataclass(frozen=True)
class SamplingParams:
    """How a signal is sampled before it is transformed.

    domain_range is the upper bound of the half-open interval [0, domain_range).
    The default sample_count is a power of two so the default grid can be
    transformed without padding.
    """

    sample_count: int = 1024
    domain_range: float = 3.14
    positions: PositionMode = "analytic"

    @property
    def step(self) -> float:
        """Spacing between consecutive samples."""
        return float(self.domain_range) / check_sample_count(self.sample_count)

    def with_(self, **changes: Any) -> "SamplingParams":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
