"""A small threaded HTTP server that keeps key-value pairs from HTML forms."""

__version__ = "0.1.0"
__all__ = ["__version__"]