"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondType
from .molecule import Molecule, count_electrons, make_molecule
from .energy import (
    EnergyEstimationConfig,
    EnergyFailure,
    EnergyResult,
    EnergySuccess,
    GroundStateMethod,
)
from .interface_contact import CdrRegion, InteractionType, InterfaceContact
from .contact_system import ContactSystem
from .binding import BindingEnergy, BindingStrength, ContactResult

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "Molecule",
    "count_electrons",
    "make_molecule",
    "EnergyEstimationConfig",
    "EnergyFailure",
    "EnergyResult",
    "EnergySuccess",
    "GroundStateMethod",
    "CdrRegion",
    "InteractionType",
    "InterfaceContact",
    "ContactSystem",
    "BindingEnergy",
    "BindingStrength",
    "ContactResult",
]
