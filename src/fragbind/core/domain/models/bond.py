#!/usr/bin/env python3
# src/fragbind/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto


class BondType(Enum):
    """Enumeration of possible bond types."""

    SINGLE = auto()
    DOUBLE = auto()
    TRIPLE = auto()
    AROMATIC = auto()
    UNKNOWN = auto()


_ORDER_TO_TYPE = {
    1.0: BondType.SINGLE,
    1.5: BondType.AROMATIC,
    2.0: BondType.DOUBLE,
    3.0: BondType.TRIPLE,
}


@dataclass(frozen=True)
class Bond:
    """Bond between two atoms, referenced by index into the owning molecule."""

    atom1: int
    atom2: int
    bond_order: float = 1.0

    def __post_init__(self):
        if self.bond_order <= 0:
            raise ValueError(f"Bond order must be positive, got {self.bond_order}")

    @property
    def bond_type(self) -> BondType:
        """Bond type derived from the bond order (1.5 is conjugated/aromatic)."""
        return _ORDER_TO_TYPE.get(float(self.bond_order), BondType.UNKNOWN)

    def shifted(self, offset: int) -> "Bond":
        """Return a copy with both endpoint indices moved by ``offset``."""
        return replace(self, atom1=self.atom1 + offset, atom2=self.atom2 + offset)
