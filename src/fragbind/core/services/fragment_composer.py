# src/fragbind/core/services/fragment_composer.py
"""Merging of molecular fragments into a single complex."""

import logging
from typing import List, Sequence

from ..domain.models.bond import Bond
from ..domain.models.molecule import Molecule
from ...exceptions import EmptyFragmentListError

logger = logging.getLogger(__name__)


def compose(
    fragments: Sequence[Molecule],
    result_name: str,
    result_charge: int,
    result_multiplicity: int,
) -> Molecule:
    """
    Merge fragments into one molecule.

    Atoms are concatenated in fragment order. Bonds of each fragment are
    shifted by the number of atoms in all preceding fragments so that they
    keep pointing at the same atoms in the merged sequence.

    The charge and multiplicity of the result are taken from the caller and
    never summed from the fragments: complexation may transfer a proton or
    couple spins differently.

    Args:
        fragments: Molecules to merge, in order
        result_name: Name of the merged molecule
        result_charge: Net charge of the merged molecule
        result_multiplicity: Spin multiplicity of the merged molecule

    Returns:
        New Molecule; the inputs are left untouched

    Raises:
        EmptyFragmentListError: If no fragments are given
    """
    if not fragments:
        raise EmptyFragmentListError(f"Cannot compose {result_name!r} from zero fragments")

    atoms = []
    bonds: List[Bond] = []
    offset = 0
    for fragment in fragments:
        atoms.extend(fragment.atoms)
        bonds.extend(bond.shifted(offset) for bond in fragment.bonds)
        logger.debug(
            "Composing %s: %s at atom offset %d", result_name, fragment.name, offset
        )
        offset += fragment.num_atoms

    return Molecule(
        name=result_name,
        atoms=tuple(atoms),
        bonds=tuple(bonds),
        charge=result_charge,
        multiplicity=result_multiplicity,
    )
