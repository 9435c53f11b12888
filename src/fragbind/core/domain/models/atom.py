#!/usr/bin/env python3
# src/fragbind/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular fragment.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Atom:
    """An element placed at a Cartesian position (Angstroms)."""

    element: str
    position: Tuple[float, float, float]

    def __post_init__(self):
        if len(self.position) != 3:
            raise ValueError(
                f"Atom position must have three coordinates, got {self.position!r}"
            )
        object.__setattr__(self, "position", tuple(float(c) for c in self.position))
