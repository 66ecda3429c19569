"""Internet connection monitor with transition logging."""

__version__ = "0.1.0"
