import pytest

from fragbind.core.domain.models.interface_contact import (
    CdrRegion,
    InteractionType,
    InterfaceContact,
)
from fragbind.core.services.contact_catalog import (
    INTERFACE_CONTACTS,
    count_by_interaction_type,
    display_name,
    list_contacts,
    residue_code,
)


def test_catalog_contents():
    assert len(INTERFACE_CONTACTS) == 9
    assert INTERFACE_CONTACTS[0] == InterfaceContact(
        "Arg97", "Asp53", CdrRegion.CDR3, InteractionType.SALT_BRIDGE, 2.9
    )
    assert all(c.distance > 0 for c in INTERFACE_CONTACTS)


def test_list_contacts_filters():
    assert list_contacts() == list(INTERFACE_CONTACTS)
    cdr3 = list_contacts(region=CdrRegion.CDR3)
    assert [c.antibody_residue for c in cdr3] == ["Arg97", "Asp101", "Tyr100", "Leu96"]
    assert list_contacts(CdrRegion.CDR1, InteractionType.CATION_PI)[0].antigen_residue == "Arg88"


def test_count_by_interaction_type():
    assert count_by_interaction_type() == {
        InteractionType.SALT_BRIDGE: 2,
        InteractionType.HYDROGEN_BOND: 3,
        InteractionType.CATION_PI: 2,
        InteractionType.HYDROPHOBIC: 2,
    }


def test_display_name():
    assert display_name(InteractionType.SALT_BRIDGE) == "Salt bridge"
    assert display_name(InteractionType.CATION_PI) == "Cation-pi"


@pytest.mark.parametrize("label, code", [("Arg97", "R"), ("TRP33", "W"), ("lys75A", "K")])
def test_residue_code(label, code):
    assert residue_code(label) == code


@pytest.mark.parametrize("label", ["R97", "Arg", "Xyz12"])
def test_residue_code_rejects_bad_labels(label):
    with pytest.raises(ValueError):
        residue_code(label)


def test_interface_contact_distance_must_be_positive():
    with pytest.raises(ValueError):
        InterfaceContact("Arg97", "Asp53", CdrRegion.CDR3, InteractionType.SALT_BRIDGE, 0.0)
