"""Shell command history keyed by working directory."""

__version__ = "0.3.0"
