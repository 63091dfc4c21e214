"""Classic array, matrix and container exercises as small Python functions."""

__version__ = "0.1.0"