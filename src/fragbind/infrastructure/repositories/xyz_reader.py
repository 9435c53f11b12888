"""Reader for XYZ coordinate files."""

import logging
from pathlib import Path
from typing import List, Union

import numpy as np

from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import Bond
from ...core.domain.models.molecule import Molecule

logger = logging.getLogger(__name__)

BOND_CUTOFF = 1.8  # Angstroms


def infer_distance_bonds(atoms: List[Atom], cutoff: float = BOND_CUTOFF) -> List[Bond]:
    """Single bonds between every pair of atoms closer than ``cutoff``."""
    if len(atoms) < 2:
        return []
    coords = np.array([atom.position for atom in atoms])
    distances = np.linalg.norm(coords[:, None, :] - coords[None, :, :], axis=-1)
    i_idx, j_idx = np.nonzero(np.triu(distances < cutoff, k=1))
    return [Bond(int(i), int(j), 1.0) for i, j in zip(i_idx, j_idx)]


def read_xyz(path: Union[str, Path], charge: int = 0, multiplicity: int = 1) -> Molecule:
    """
    Read a molecule from an XYZ file.

    Line 1 holds the atom count, line 2 a title used as the molecule name and
    each following line ``Element X Y Z`` in Angstroms. Bonds are inferred from
    interatomic distances.

    Raises:
        ValueError: If the file is malformed
    """
    path = Path(path)
    with open(path, "r") as f:
        lines = f.read().splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 3:
        raise ValueError(f"{path}: XYZ file needs a count line, a title and atoms")
    try:
        n_atoms = int(lines[0].strip())
    except ValueError:
        raise ValueError(f"{path}: first line must be the atom count") from None
    if n_atoms < 1:
        raise ValueError(f"{path}: atom count must be positive")
    if len(lines) < n_atoms + 2:
        raise ValueError(
            f"{path}: expected {n_atoms} atom lines, found {len(lines) - 2}"
        )

    atoms = []
    for number, line in enumerate(lines[2 : n_atoms + 2], start=3):
        parts = line.split()
        if len(parts) < 4:
            raise ValueError(f"{path}:{number}: expected 'Element X Y Z', got {line!r}")
        try:
            position = tuple(float(v) for v in parts[1:4])
        except ValueError:
            raise ValueError(f"{path}:{number}: bad coordinates in {line!r}") from None
        atoms.append(Atom(parts[0], position))

    name = lines[1].strip() or path.stem
    bonds = infer_distance_bonds(atoms)
    logger.debug("Read %d atoms and inferred %d bonds from %s", len(atoms), len(bonds), path)
    return Molecule(
        name=name, atoms=atoms, bonds=bonds, charge=charge, multiplicity=multiplicity
    )
