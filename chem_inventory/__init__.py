"""Chemical inventory: product list with validated mutations and local snapshot persistence."""

__version__ = "0.1.0"
