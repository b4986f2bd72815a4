from __future__ import annotations

import numpy as np


class NumpyFFTBackend:
    name = "numpy.fft"

    def forward(self, values: np.ndarray) -> np.ndarray:
        return np.fft.fft(np.asarray(values, dtype=np.complex128))
