"""Contact type modelled as an antibody fragment plus an antigen fragment."""

from dataclasses import dataclass

from .interface_contact import CdrRegion, InteractionType
from .molecule import Molecule


@dataclass(frozen=True)
class ContactSystem:
    """
    Two fragments whose interaction energy is to be estimated.

    ``complex_charge`` and ``complex_multiplicity`` describe the composed
    complex. They are stated by whoever defines the system rather than derived
    from the fragments, since complexation can move protons or couple spins.
    """

    name: str
    antibody_fragment: Molecule
    antigen_fragment: Molecule
    interaction_type: InteractionType
    region: CdrRegion
    complex_charge: int
    complex_multiplicity: int = 1
    description: str = ""

    def __post_init__(self):
        if self.complex_multiplicity < 1:
            raise ValueError(
                f"{self.name}: complex multiplicity must be a positive integer, "
                f"got {self.complex_multiplicity}"
            )

    @property
    def key(self) -> str:
        """Lower-cased name used for lookups and filtering."""
        return self.name.lower()

    @property
    def fragments(self):
        return (self.antibody_fragment, self.antigen_fragment)
