# src/fragbind/infrastructure/repositories/contact_repository.py
"""Built-in contact system presets and CSV loading of custom systems."""

import logging
from typing import Dict, Iterable, List, Optional

import pandas as pd

from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import Bond
from ...core.domain.models.contact_system import ContactSystem
from ...core.domain.models.interface_contact import CdrRegion, InteractionType
from ...core.domain.models.molecule import Molecule, make_molecule

logger = logging.getLogger(__name__)

# Fragments are kept to <= 3 atoms and complexes to <= 5 atoms so that every
# preset stays tractable for iterative estimators.


def _salt_bridge() -> ContactSystem:
    # LiH models the electropositive guanidinium, HF the carboxylate
    antibody = make_molecule(
        "LiH (Arg+ model)",
        [("Li", (0.0, 0.0, 0.0)), ("H", (1.60, 0.0, 0.0))],
        [(0, 1, 1.0)],
    )
    antigen = make_molecule(
        "HF (Asp- model)",
        [("H", (3.40, 0.0, 0.0)), ("F", (4.32, 0.0, 0.0))],
        [(0, 1, 1.0)],
    )
    return ContactSystem(
        name="Salt-Bridge",
        antibody_fragment=antibody,
        antigen_fragment=antigen,
        interaction_type=InteractionType.SALT_BRIDGE,
        region=CdrRegion.CDR3,
        complex_charge=0,
        description="Arg-Asp ionic contact (LiH...HF model, CDR3-epitope)",
    )


def _hydrogen_bond() -> ContactSystem:
    antibody = make_molecule(
        "HF (NH donor model)",
        [("H", (0.0, 0.0, 0.0)), ("F", (0.92, 0.0, 0.0))],
        [(0, 1, 1.0)],
    )
    antigen = make_molecule(
        "H2O (C=O acceptor model)",
        [
            ("O", (2.72, 0.0, 0.0)),
            ("H", (3.35, 0.76, 0.0)),
            ("H", (3.35, -0.76, 0.0)),
        ],
        [(0, 1, 1.0), (0, 2, 1.0)],
    )
    return ContactSystem(
        name="H-Bond",
        antibody_fragment=antibody,
        antigen_fragment=antigen,
        interaction_type=InteractionType.HYDROGEN_BOND,
        region=CdrRegion.CDR2,
        complex_charge=0,
        description="Ser/Tyr-OH...Asn/Gln C=O (HF...H2O model, CDR2-epitope)",
    )


def _dispersion() -> ContactSystem:
    antibody = make_molecule(
        "LiH (CH model)",
        [("Li", (0.0, 0.0, 0.0)), ("H", (1.60, 0.0, 0.0))],
        [(0, 1, 1.0)],
    )
    antigen = make_molecule(
        "H2 (CH model)",
        [("H", (3.50, 0.0, 0.0)), ("H", (4.24, 0.0, 0.0))],
        [(0, 1, 1.0)],
    )
    return ContactSystem(
        name="Dispersion",
        antibody_fragment=antibody,
        antigen_fragment=antigen,
        interaction_type=InteractionType.HYDROPHOBIC,
        region=CdrRegion.CDR1,
        complex_charge=0,
        description="Leu/Ile hydrophobic packing (LiH...H2 dispersion model, CDR1)",
    )


def _cation_pi() -> ContactSystem:
    # Acetylene stands in for the Tyr ring, Li+ for the Lys ammonium
    antibody = make_molecule(
        "C2H2 (Tyr pi model)",
        [
            ("H", (-1.66, 0.0, 0.0)),
            ("C", (-0.60, 0.0, 0.0)),
            ("C", (0.60, 0.0, 0.0)),
            ("H", (1.66, 0.0, 0.0)),
        ],
        [(0, 1, 1.0), (1, 2, 3.0), (2, 3, 1.0)],
    )
    antigen = make_molecule("Li+ (Lys+ model)", [("Li", (0.0, 2.40, 0.0))], charge=1)
    return ContactSystem(
        name="Cation-Pi",
        antibody_fragment=antibody,
        antigen_fragment=antigen,
        interaction_type=InteractionType.CATION_PI,
        region=CdrRegion.CDR3,
        complex_charge=1,
        description="Tyr ring...Lys ammonium (C2H2...Li+ model, CDR3-epitope)",
    )


def builtin_presets() -> Dict[str, ContactSystem]:
    """All built-in contact systems keyed by lower-case name."""
    presets = [_salt_bridge(), _hydrogen_bond(), _dispersion(), _cation_pi()]
    return {preset.key: preset for preset in presets}


def parse_atoms(text: str) -> List[Atom]:
    """
    Parse the compact atom format ``"C:0,0,0|O:0,0,1.21|H:0.94,0,-0.54"``.

    Raises:
        ValueError: If an entry is not ``element:x,y,z``
    """
    atoms = []
    for entry in text.split("|"):
        entry = entry.strip()
        if not entry:
            continue
        element, sep, coords = entry.partition(":")
        values = coords.split(",")
        if not sep or len(values) != 3:
            raise ValueError(f"Malformed atom entry {entry!r}; expected El:x,y,z")
        atoms.append(Atom(element.strip(), tuple(float(v) for v in values)))
    return atoms


def infer_chain_bonds(atoms: List[Atom]) -> List[Bond]:
    """Single bonds between consecutive atoms."""
    return [Bond(i, i + 1, 1.0) for i in range(len(atoms) - 1)]


def molecule_from_atom_string(name: str, text: str, charge: int = 0) -> Molecule:
    atoms = parse_atoms(text)
    if not atoms:
        raise ValueError(f"No atoms given for {name}")
    return Molecule(name=name, atoms=atoms, bonds=infer_chain_bonds(atoms), charge=charge)


def parse_interaction_type(text: str) -> InteractionType:
    """Interaction type from its tag (``salt-bridge``) or display name (``Salt bridge``)."""
    normalized = text.strip().lower().replace("_", "-").replace(" ", "-")
    aliases = {"h-bond": InteractionType.HYDROGEN_BOND, "van-der-waals": InteractionType.HYDROPHOBIC}
    if normalized in aliases:
        return aliases[normalized]
    for kind in InteractionType:
        if normalized in (kind.value, kind.display_name.lower().replace(" ", "-")):
            return kind
    raise ValueError(f"Unknown interaction type: {text!r}")


def parse_region(text: str) -> CdrRegion:
    try:
        return CdrRegion(text.strip().upper())
    except ValueError:
        raise ValueError(f"Unknown CDR region: {text!r}") from None


def load_contacts_from_csv(path: str) -> List[ContactSystem]:
    """
    Load contact systems from a CSV file.

    Each row either references a preset (columns ``name``, ``preset``) or
    defines fragments inline (columns ``name``, ``antibody_atoms``,
    ``antigen_atoms``, ``contact_type``, ``cdr_region`` and optionally
    ``description``, ``antibody_charge``, ``antigen_charge``,
    ``complex_charge``, ``complex_multiplicity``). Rows that cannot be used are
    skipped with a warning.

    Args:
        path: CSV file path

    Returns:
        Contact systems in file order
    """
    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    frame.columns = [str(c).strip().lower() for c in frame.columns]
    presets = builtin_presets()

    contacts = []
    for line, row in enumerate(frame.to_dict("records"), start=2):
        row = {k: str(v).strip() for k, v in row.items()}
        name = row.get("name") or f"row-{line}"
        try:
            contact = _contact_from_row(name, row, presets)
        except ValueError as e:
            logger.warning("Skipping %s (line %d): %s", name, line, e)
            continue
        contacts.append(contact)

    logger.info("Loaded %d contact systems from %s", len(contacts), path)
    return contacts


def _contact_from_row(
    name: str, row: Dict[str, str], presets: Dict[str, ContactSystem]
) -> ContactSystem:
    preset_key = row.get("preset", "")
    if preset_key:
        preset = presets.get(preset_key.lower())
        if preset is None:
            raise ValueError(
                f"unknown preset {preset_key!r} (available: {', '.join(sorted(presets))})"
            )
        return ContactSystem(
            name=name,
            antibody_fragment=preset.antibody_fragment,
            antigen_fragment=preset.antigen_fragment,
            interaction_type=preset.interaction_type,
            region=preset.region,
            complex_charge=preset.complex_charge,
            complex_multiplicity=preset.complex_multiplicity,
            description=row.get("description") or preset.description,
        )

    missing = [
        column
        for column in ("antibody_atoms", "antigen_atoms", "contact_type", "cdr_region")
        if not row.get(column)
    ]
    if missing:
        raise ValueError(f"missing required columns: {', '.join(missing)}")

    antibody = molecule_from_atom_string(
        f"{name} antibody", row["antibody_atoms"], _int_field(row, "antibody_charge", 0)
    )
    antigen = molecule_from_atom_string(
        f"{name} antigen", row["antigen_atoms"], _int_field(row, "antigen_charge", 0)
    )
    return ContactSystem(
        name=name,
        antibody_fragment=antibody,
        antigen_fragment=antigen,
        interaction_type=parse_interaction_type(row["contact_type"]),
        region=parse_region(row["cdr_region"]),
        complex_charge=_int_field(row, "complex_charge", 0),
        complex_multiplicity=_int_field(row, "complex_multiplicity", 1),
        description=row.get("description", ""),
    )


def _int_field(row: Dict[str, str], column: str, default: int) -> int:
    value = row.get(column, "")
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{column} must be an integer, got {value!r}") from None


def select_contacts(
    contacts: Iterable[ContactSystem], filters: Optional[Iterable[str]] = None
) -> List[ContactSystem]:
    """Keep contacts whose name contains any filter (case-insensitive)."""
    contacts = list(contacts)
    wanted = [f.strip().lower() for f in (filters or []) if f.strip()]
    if not wanted:
        return contacts
    return [c for c in contacts if any(f in c.key for f in wanted)]
