"""Domain models for binding energy results."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .contact_system import ContactSystem


class BindingStrength(Enum):
    """Qualitative interaction strength bucket."""

    STRONG = "Strong"
    MODERATE = "Moderate"
    WEAK = "Weak"
    UNFAVORABLE = "Unfavorable"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class BindingEnergy:
    """Binding energy in several units together with its classification."""

    hartree: float
    kcal_per_mol: float
    kj_per_mol: float
    strength: BindingStrength


@dataclass
class ContactResult:
    """Energy profile of one contact system.

    Energies of estimations that failed stay ``None``; ``binding`` is only set
    when all three estimations succeeded.
    """

    contact: ContactSystem
    antibody_energy: Optional[float] = None
    antigen_energy: Optional[float] = None
    complex_energy: Optional[float] = None
    binding: Optional[BindingEnergy] = None
    dissociation_constant: Optional[float] = None
    failure: Optional[str] = None
    compute_time_seconds: float = 0.0

    @property
    def has_failure(self) -> bool:
        return self.failure is not None
