"""itemctl — deterministic operations over build item collections."""

__version__ = "0.3.0"
