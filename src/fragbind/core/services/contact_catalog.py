"""Static catalog of antibody-antigen interface contacts.

The catalog is descriptive: it lists which residue pairs meet across a
CDR-epitope interface and how they interact. It does not feed the energy
pipeline.
"""

import re
from collections import Counter
from typing import Dict, List, Optional, Tuple

from Bio.Data.IUPACData import protein_letters_3to1

from ..domain.models.interface_contact import CdrRegion, InteractionType, InterfaceContact

_RESIDUE_LABEL = re.compile(r"^([A-Za-z]{3})(\d+)([A-Za-z]?)$")

INTERFACE_CONTACTS: Tuple[InterfaceContact, ...] = (
    InterfaceContact("Arg97", "Asp53", CdrRegion.CDR3, InteractionType.SALT_BRIDGE, 2.9),
    InterfaceContact("Asp101", "Lys75", CdrRegion.CDR3, InteractionType.SALT_BRIDGE, 3.1),
    InterfaceContact("Ser31", "Asn60", CdrRegion.CDR1, InteractionType.HYDROGEN_BOND, 2.8),
    InterfaceContact("Tyr52", "Gln41", CdrRegion.CDR2, InteractionType.HYDROGEN_BOND, 3.0),
    InterfaceContact("Thr57", "Glu44", CdrRegion.CDR2, InteractionType.HYDROGEN_BOND, 2.7),
    InterfaceContact("Tyr100", "Lys47", CdrRegion.CDR3, InteractionType.CATION_PI, 4.2),
    InterfaceContact("Trp33", "Arg88", CdrRegion.CDR1, InteractionType.CATION_PI, 4.5),
    InterfaceContact("Leu96", "Ile64", CdrRegion.CDR3, InteractionType.HYDROPHOBIC, 3.9),
    InterfaceContact("Phe50", "Val71", CdrRegion.CDR2, InteractionType.HYDROPHOBIC, 4.0),
)


def list_contacts(
    region: Optional[CdrRegion] = None,
    interaction_type: Optional[InteractionType] = None,
) -> List[InterfaceContact]:
    """Catalog entries, optionally restricted to a region and/or interaction type."""
    return [
        contact
        for contact in INTERFACE_CONTACTS
        if (region is None or contact.region is region)
        and (interaction_type is None or contact.interaction_type is interaction_type)
    ]


def display_name(interaction_type: InteractionType) -> str:
    """Human-readable label of an interaction type tag."""
    return interaction_type.display_name


def count_by_interaction_type() -> Dict[InteractionType, int]:
    """Number of catalog entries per interaction type (zero counts included)."""
    counts = Counter(contact.interaction_type for contact in INTERFACE_CONTACTS)
    return {kind: counts.get(kind, 0) for kind in InteractionType}


def residue_code(label: str) -> str:
    """
    One-letter code of a residue label such as ``"Arg97"``.

    Raises:
        ValueError: If the label is not a three-letter residue name followed
            by a sequence number, or the residue is unknown
    """
    match = _RESIDUE_LABEL.match(label.strip())
    if not match:
        raise ValueError(f"Unrecognized residue label: {label!r}")
    name = match.group(1).capitalize()
    try:
        return protein_letters_3to1[name]
    except KeyError:
        raise ValueError(f"Unknown residue name {name!r} in {label!r}") from None
