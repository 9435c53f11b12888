"""Fragment-based binding energy composition."""

__version__ = "0.1.0"
