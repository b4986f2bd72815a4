import numpy as np
import matplotlib.pyplot as plt

from spectral_synth import SignalDesign

# Two tones over exactly one period of the slowest wave; angular frequencies
# then land on whole bins.
design = SignalDesign().with_sampling(sample_count=1024, domain_range=2 * np.pi)
design.add("sin", amplitude=1.0, frequency=5.0)
design.add("cos", amplitude=0.5, frequency=20.0, offset=0.2)
print(design)

result = design.compute()

n = result.spectrum.size
freqs = result.frequencies()[: n // 2]
mag = result.magnitude()[: n // 2] * 2 / n
for k in np.argsort(mag)[::-1][:3]:
    print(f"w={freqs[k]:6.2f}  |X|*2/n={mag[k]:.3f}")

fig, axes = design.plot(part="magnitude", axis="frequency")
plt.show()
