import matplotlib.pyplot as plt

from spectral_synth import PeriodicComponent, compute, plot_panels

components = [
    PeriodicComponent.sine(amplitude=1.0, frequency=2.0),
    PeriodicComponent.sine(amplitude=0.5, frequency=9.0, offset=0.25),
    PeriodicComponent.cosine(amplitude=0.25, frequency=15.0),
]

# Classic display: real part of each bin against the sample positions.
result = compute(components, 512, 3.14)
fig, axes = plot_panels(result, components=components)
axes[2].set_xlabel("x")
plt.show()
