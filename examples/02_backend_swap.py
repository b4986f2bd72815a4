import time

import numpy as np

from spectral_synth import PeriodicComponent, compute
from spectral_synth.backends import AVAILABLE_BACKENDS

components = [
    PeriodicComponent.sine(amplitude=1.0, frequency=3.0),
    PeriodicComponent.cosine(amplitude=0.3, frequency=40.0),
]

reference = compute(components, 4096, 20.0, backend="numpy.fft")

for name in AVAILABLE_BACKENDS:
    t0 = time.perf_counter()
    res = compute(components, 4096, 20.0, backend=name)
    dt = time.perf_counter() - t0
    err = float(np.max(np.abs(res.spectrum - reference.spectrum)))
    print(f"{name:18s} {dt * 1e3:8.2f} ms   max |diff| = {err:.2e}")
