#!/usr/bin/env python3
# src/fragbind/core/domain/models/molecule.py

"""
Domain model representing a molecular fragment or complex.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import networkx as nx
import numpy as np

from .atom import Atom
from .bond import Bond
from ....exceptions import InvalidBondError
from ...utils.periodic_table import atomic_number, atomic_weight


@dataclass(frozen=True)
class Molecule:
    """
    Immutable atom set, bond set, net charge and spin multiplicity.

    Bond endpoints index into ``atoms``. Composition never mutates a molecule;
    it builds a new one.
    """

    name: str
    atoms: Tuple[Atom, ...]
    bonds: Tuple[Bond, ...] = ()
    charge: int = 0
    multiplicity: int = 1

    def __post_init__(self):
        object.__setattr__(self, "atoms", tuple(self.atoms))
        object.__setattr__(self, "bonds", tuple(self.bonds))

        if self.multiplicity < 1:
            raise ValueError(
                f"Multiplicity must be a positive integer, got {self.multiplicity}"
            )

        n_atoms = len(self.atoms)
        for bond in self.bonds:
            if not (0 <= bond.atom1 < n_atoms and 0 <= bond.atom2 < n_atoms):
                raise InvalidBondError(
                    f"{self.name}: bond {bond.atom1}-{bond.atom2} references an atom "
                    f"outside [0, {n_atoms})"
                )

    @property
    def num_atoms(self) -> int:
        return len(self.atoms)

    def count_electrons(self) -> int:
        """Electron count: sum of atomic numbers minus the net charge."""
        return count_electrons(self)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self.atoms:
            return np.zeros((0, 3))
        return np.array([atom.position for atom in self.atoms], dtype=float)

    def bond_length(self, i: int, j: int) -> float:
        """Euclidean distance between atoms ``i`` and ``j`` in Angstroms."""
        coords = self.get_coordinates()
        return float(np.linalg.norm(coords[i] - coords[j]))

    def mass(self) -> float:
        """Molecular mass in g/mol from standard atomic weights."""
        return sum(atomic_weight(atom.element) for atom in self.atoms)

    def to_graph(self) -> nx.Graph:
        """Build a NetworkX graph with one node per atom and one edge per bond."""
        graph = nx.Graph(name=self.name)
        for index, atom in enumerate(self.atoms):
            graph.add_node(index, element=atom.element, position=atom.position)
        for bond in self.bonds:
            graph.add_edge(bond.atom1, bond.atom2, bond_order=bond.bond_order)
        return graph


def count_electrons(molecule: Molecule) -> int:
    """
    Count the electrons of a molecule.

    Args:
        molecule: Molecule to inspect

    Returns:
        Sum of the atomic numbers minus the net charge

    Raises:
        UnknownElementError: If an atom's element symbol is not recognized
    """
    return sum(atomic_number(atom.element) for atom in molecule.atoms) - molecule.charge


def make_molecule(
    name: str,
    atoms: Sequence[Tuple[str, Tuple[float, float, float]]],
    bonds: Sequence[Tuple[int, int, float]] = (),
    charge: int = 0,
    multiplicity: int = 1,
) -> Molecule:
    """Build a Molecule from plain ``(element, position)`` and ``(i, j, order)`` tuples."""
    return Molecule(
        name=name,
        atoms=tuple(Atom(element, position) for element, position in atoms),
        bonds=tuple(Bond(i, j, order) for i, j, order in bonds),
        charge=charge,
        multiplicity=multiplicity,
    )
