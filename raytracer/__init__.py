"""A ray tracer that renders JSON scene descriptions to PPM images."""

__version__ = "0.1.0"