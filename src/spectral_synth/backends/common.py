from __future__ import annotations

from typing import Protocol

import numpy as np


class TransformBackend(Protocol):
    """Backend protocol: forward DFT of one power-of-two-length complex array."""

    name: str

    def forward(self, values: np.ndarray) -> np.ndarray: ...
