"""spectral_synth public API."""
from .components import PeriodicComponent, WaveKind
from .design import SignalDesign
from .inputs import SamplingParams
from .pipeline import SignalResult, compute
from .plotting import plot_components, plot_panels, plot_signal, plot_spectrum
from .synthesis import SamplingError, synthesize
from .transform import TransformLengthError, inverse_transform, transform
from . import backends

__all__ = [
    "PeriodicComponent",
    "WaveKind",
    "SignalDesign",
    "SamplingParams",
    "SignalResult",
    "compute",
    "synthesize",
    "transform",
    "inverse_transform",
    "SamplingError",
    "TransformLengthError",
    "plot_components",
    "plot_signal",
    "plot_spectrum",
    "plot_panels",
    "backends",
]
