"""Engine-independent building blocks for small games: colors, geometry, animation, input and telemetry."""

__version__ = "0.1.0"