from __future__ import annotations

import numpy as np
from scipy import fft as sp_fft


class ScipyFFTBackend:
    name = "scipy.fft"

    def forward(self, values: np.ndarray) -> np.ndarray:
        return sp_fft.fft(np.asarray(values, dtype=np.complex128))
