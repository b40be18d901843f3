"""Scene-file reading, ray intersection and Phong shading for a small ray tracer."""

__version__ = "0.1.0"