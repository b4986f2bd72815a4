"""Transform backend implementations + registry."""

from __future__ import annotations

from typing import Dict

from .common import TransformBackend
from .numpy_fft import NumpyFFTBackend
from .radix2 import Radix2Backend, RecursiveRadix2Backend
from .scipy_fft import ScipyFFTBackend

_BACKENDS: Dict[str, TransformBackend] = {
    "radix2": Radix2Backend(),
    "radix2.recursive": RecursiveRadix2Backend(),
    "numpy.fft": NumpyFFTBackend(),
    "scipy.fft": ScipyFFTBackend(),
}


def get_backend(name: str) -> TransformBackend:
    """Return a backend implementation by name."""
    try:
        return _BACKENDS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown transform backend {name!r}; choose one of {AVAILABLE_BACKENDS}."
        ) from e


AVAILABLE_BACKENDS = tuple(_BACKENDS.keys())
