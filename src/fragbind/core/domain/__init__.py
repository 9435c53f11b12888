"""Core domain models and interfaces."""

from .models.molecule import Molecule
from .models.energy import EnergyEstimationConfig, EnergyFailure, EnergySuccess
from .interfaces.energy_estimator import EnergyEstimator

__all__ = [
    "Molecule",
    "EnergyEstimationConfig",
    "EnergyFailure",
    "EnergySuccess",
    "EnergyEstimator",
]
