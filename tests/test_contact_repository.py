import logging

import pytest

from fragbind.core.domain.models.contact_system import ContactSystem
from fragbind.core.domain.models.interface_contact import CdrRegion, InteractionType
from fragbind.infrastructure.repositories.contact_repository import (
    builtin_presets,
    load_contacts_from_csv,
    molecule_from_atom_string,
    parse_atoms,
    parse_interaction_type,
    parse_region,
    select_contacts,
)


def test_builtin_presets():
    presets = builtin_presets()
    assert sorted(presets) == ["cation-pi", "dispersion", "h-bond", "salt-bridge"]
    for contact in presets.values():
        assert contact.antibody_fragment.num_atoms <= 4
        assert contact.antigen_fragment.num_atoms <= 3
    assert presets["cation-pi"].complex_charge == 1
    assert presets["cation-pi"].antigen_fragment.charge == 1
    assert presets["salt-bridge"].interaction_type is InteractionType.SALT_BRIDGE


def test_parse_atoms():
    atoms = parse_atoms("C:0,0,0| O:0,0,1.21 |")
    assert [a.element for a in atoms] == ["C", "O"]
    assert atoms[1].position == (0.0, 0.0, 1.21)


@pytest.mark.parametrize("text", ["C0,0,0", "C:0,0", "C:a,b,c"])
def test_parse_atoms_rejects_malformed_entries(text):
    with pytest.raises(ValueError):
        parse_atoms(text)


def test_molecule_from_atom_string_chains_bonds():
    molecule = molecule_from_atom_string("HOH", "H:0,0.76,0.59|O:0,0,0|H:0,-0.76,0.59", -1)
    assert molecule.charge == -1
    assert [(b.atom1, b.atom2) for b in molecule.bonds] == [(0, 1), (1, 2)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("salt-bridge", InteractionType.SALT_BRIDGE),
        ("Hydrogen bond", InteractionType.HYDROGEN_BOND),
        ("H-Bond", InteractionType.HYDROGEN_BOND),
        ("cation_pi", InteractionType.CATION_PI),
        ("van der waals", InteractionType.HYDROPHOBIC),
    ],
)
def test_parse_interaction_type(text, expected):
    assert parse_interaction_type(text) is expected


def test_parse_interaction_type_unknown():
    with pytest.raises(ValueError):
        parse_interaction_type("halogen")


def test_parse_region():
    assert parse_region(" cdr2 ") is CdrRegion.CDR2
    with pytest.raises(ValueError):
        parse_region("CDR4")


def test_load_contacts_from_csv(tmp_path, caplog):
    path = tmp_path / "contacts.csv"
    path.write_text(
        "name,preset,antibody_atoms,antigen_atoms,contact_type,cdr_region,"
        "antigen_charge,complex_charge,description\n"
        "My Bridge,salt-bridge,,,,,,,\n"
        'Inline,,"H:0,0,0|F:0,0,0.92","Li:0,0,3.0",cation-pi,CDR1,1,1,ion pair\n'
        'Broken,,"H:0,0,0",,hydrophobic,CDR1,,,\n'
        "Ghost,nonexistent,,,,,,,\n"
    )
    with caplog.at_level(logging.WARNING):
        contacts = load_contacts_from_csv(str(path))

    assert [c.name for c in contacts] == ["My Bridge", "Inline"]
    bridge, inline = contacts
    assert bridge.interaction_type is InteractionType.SALT_BRIDGE
    assert bridge.antibody_fragment == builtin_presets()["salt-bridge"].antibody_fragment
    assert inline.antigen_fragment.charge == 1
    assert inline.complex_charge == 1
    assert inline.region is CdrRegion.CDR1
    assert inline.description == "ion pair"
    assert "Broken" in caplog.text and "line 4" in caplog.text
    assert "Ghost" in caplog.text


def test_load_contacts_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_contacts_from_csv(str(tmp_path / "missing.csv"))


def test_select_contacts():
    contacts = list(builtin_presets().values())
    assert select_contacts(contacts) == contacts
    assert [c.key for c in select_contacts(contacts, ["SALT", " dispersion "])] == [
        "salt-bridge",
        "dispersion",
    ]
    assert select_contacts(contacts, ["nothing"]) == []


def test_load_contacts_skips_invalid_multiplicity(tmp_path, caplog):
    path = tmp_path / "contacts.csv"
    path.write_text(
        "name,antibody_atoms,antigen_atoms,contact_type,cdr_region,complex_multiplicity\n"
        'Zero,"H:0,0,0|F:0,0,0.92","H:0,0,3.0|H:0,0,3.74",h-bond,CDR2,0\n'
        'Triplet,"H:0,0,0|F:0,0,0.92","H:0,0,3.0|H:0,0,3.74",h-bond,CDR2,3\n'
    )
    with caplog.at_level(logging.WARNING):
        contacts = load_contacts_from_csv(str(path))

    assert [c.name for c in contacts] == ["Triplet"]
    assert contacts[0].complex_multiplicity == 3
    assert "Zero" in caplog.text and "multiplicity" in caplog.text


def test_contact_system_rejects_non_positive_multiplicity():
    preset = builtin_presets()["h-bond"]
    with pytest.raises(ValueError):
        ContactSystem(
            name="bad",
            antibody_fragment=preset.antibody_fragment,
            antigen_fragment=preset.antigen_fragment,
            interaction_type=preset.interaction_type,
            region=preset.region,
            complex_charge=0,
            complex_multiplicity=-1,
        )
