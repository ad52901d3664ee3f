"""A recursive ray tracer with shapes, patterns, shadows, reflection and refraction."""

__version__ = "0.1.0"