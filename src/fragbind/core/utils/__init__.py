"""Shared helpers."""

from .periodic_table import atomic_number, atomic_weight, normalize_symbol
from .timing import Timer

__all__ = ["Timer", "atomic_number", "atomic_weight", "normalize_symbol"]
