"""Public Transport Victoria (Melbourne) network provider adapter."""

__version__ = "0.1.0"
