import warnings

from spectral_synth import PeriodicComponent, TransformLengthError, compute

components = [PeriodicComponent()]

# 1000 samples cannot be transformed by a radix-2 FFT as-is.
try:
    compute(components, 1000, 3.14)
except TransformLengthError as exc:
    print("strict:", exc)

padded = compute(components, 1000, 3.14, length_policy="pad")
print(f"pad: {padded.y.size} samples -> {padded.spectrum.size} bins (+{padded.padded} zeros)")

cut = compute(components, 1000, 3.14, length_policy="truncate")
print(f"truncate: {cut.y.size} samples -> {cut.spectrum.size} bins (-{cut.truncated})")

# Invalid sampling parameters give an empty result instead of an exception.
with warnings.catch_warnings(record=True) as caught:
    warnings.simplefilter("always")
    empty = compute(components, 0, 3.14)
print("sample_count=0:", empty.is_empty, "|", caught[0].message)
