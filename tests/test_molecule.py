import dataclasses

import networkx as nx
import numpy as np
import pytest

from fragbind.core.domain.models.atom import Atom
from fragbind.core.domain.models.bond import Bond, BondType
from fragbind.core.domain.models.molecule import Molecule, count_electrons
from fragbind.exceptions import InvalidBondError, UnknownElementError


def test_count_electrons_neutral(water):
    assert count_electrons(water) == 10
    assert water.count_electrons() == 10


def test_count_electrons_subtracts_charge():
    hydronium = Molecule(
        "H3O+",
        atoms=[Atom("O", (0, 0, 0)), Atom("H", (1, 0, 0)), Atom("H", (0, 1, 0)), Atom("H", (0, 0, 1))],
        bonds=[Bond(0, 1), Bond(0, 2), Bond(0, 3)],
        charge=1,
    )
    assert count_electrons(hydronium) == 10

    chloride = Molecule("Cl-", atoms=[Atom("Cl", (0, 0, 0))], charge=-1)
    assert count_electrons(chloride) == 18


def test_element_symbols_are_case_insensitive():
    hcl = Molecule("HCl", atoms=[Atom("h", (0, 0, 0)), Atom("CL", (0, 0, 1.27))])
    assert count_electrons(hcl) == 18


def test_unknown_element_raises():
    molecule = Molecule("bogus", atoms=[Atom("H", (0, 0, 0)), Atom("Xq", (1, 0, 0))])
    with pytest.raises(UnknownElementError) as excinfo:
        count_electrons(molecule)
    assert excinfo.value.symbol == "Xq"


def test_bond_index_out_of_range_rejected():
    with pytest.raises(InvalidBondError):
        Molecule("broken", atoms=[Atom("H", (0, 0, 0))], bonds=[Bond(0, 1)])
    with pytest.raises(InvalidBondError):
        Molecule("negative", atoms=[Atom("H", (0, 0, 0)), Atom("H", (0, 0, 1))], bonds=[Bond(-1, 1)])


def test_multiplicity_must_be_positive():
    with pytest.raises(ValueError):
        Molecule("H", atoms=[Atom("H", (0, 0, 0))], multiplicity=0)


def test_bond_order_must_be_positive():
    with pytest.raises(ValueError):
        Bond(0, 1, 0.0)


def test_bond_type_from_order():
    assert Bond(0, 1, 1.0).bond_type is BondType.SINGLE
    assert Bond(0, 1, 1.5).bond_type is BondType.AROMATIC
    assert Bond(0, 1, 2.0).bond_type is BondType.DOUBLE
    assert Bond(0, 1, 3.0).bond_type is BondType.TRIPLE
    assert Bond(0, 1, 2.5).bond_type is BondType.UNKNOWN


def test_molecule_is_immutable(water):
    with pytest.raises(dataclasses.FrozenInstanceError):
        water.charge = 1
    assert isinstance(water.atoms, tuple)
    assert isinstance(water.bonds, tuple)


def test_coordinates_and_bond_length(hydrogen):
    coords = hydrogen.get_coordinates()
    assert coords.shape == (2, 3)
    assert hydrogen.bond_length(0, 1) == pytest.approx(0.74)
    np.testing.assert_allclose(coords[1], [0.0, 0.0, 0.74])


def test_to_graph(water):
    graph = water.to_graph()
    assert isinstance(graph, nx.Graph)
    assert graph.number_of_nodes() == 3
    assert graph.number_of_edges() == 2
    assert graph.nodes[0]["element"] == "O"
    assert graph.edges[0, 1]["bond_order"] == 1.0


def test_mass(water):
    assert water.mass() == pytest.approx(18.015, abs=0.01)
