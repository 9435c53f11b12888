"""Descriptive model of an antibody-antigen interface contact."""

from dataclasses import dataclass
from enum import Enum


class CdrRegion(Enum):
    """Complementarity-determining region hosting the antibody residue."""

    CDR1 = "CDR1"
    CDR2 = "CDR2"
    CDR3 = "CDR3"


class InteractionType(Enum):
    """Interaction category of a residue-pair contact."""

    SALT_BRIDGE = "salt-bridge"
    HYDROGEN_BOND = "hydrogen-bond"
    CATION_PI = "cation-pi"
    HYDROPHOBIC = "hydrophobic"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    InteractionType.SALT_BRIDGE: "Salt bridge",
    InteractionType.HYDROGEN_BOND: "Hydrogen bond",
    InteractionType.CATION_PI: "Cation-pi",
    InteractionType.HYDROPHOBIC: "Hydrophobic",
}


@dataclass(frozen=True)
class InterfaceContact:
    """Residue pair in contact across the antibody-antigen interface."""

    antibody_residue: str
    antigen_residue: str
    region: CdrRegion
    interaction_type: InteractionType
    distance: float

    def __post_init__(self):
        if not self.distance > 0:
            raise ValueError(
                f"Contact distance must be positive, got {self.distance} "
                f"({self.antibody_residue}-{self.antigen_residue})"
            )
