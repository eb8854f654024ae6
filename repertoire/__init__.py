"""Opening line trainer: picks the next repertoire line to review."""

__version__ = "0.1.0"
