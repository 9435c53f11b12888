"""Core domain models, interfaces and services for fragment binding energies."""

from .domain.models.molecule import Molecule, count_electrons
from .domain.models.energy import EnergyEstimationConfig, EnergyFailure, EnergySuccess
from .domain.interfaces.energy_estimator import EnergyEstimator
from .services.fragment_composer import compose
from .services.estimation_client import EnergyEstimationClient
from .services.contact_screening_service import ContactScreeningService

__all__ = [
    "Molecule",
    "count_electrons",
    "EnergyEstimationConfig",
    "EnergyFailure",
    "EnergySuccess",
    "EnergyEstimator",
    "compose",
    "EnergyEstimationClient",
    "ContactScreeningService",
]
