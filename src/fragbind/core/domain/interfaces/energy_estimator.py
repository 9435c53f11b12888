"""Interface for ground-state energy estimation capabilities."""

from abc import ABC, abstractmethod
from ..models.molecule import Molecule
from ..models.energy import EnergyEstimationConfig, EnergyResult


class EnergyEstimator(ABC):
    """Abstract base class for ground-state energy estimators."""

    name = "estimator"

    @abstractmethod
    def estimate(
        self, molecule: Molecule, config: EnergyEstimationConfig
    ) -> EnergyResult:
        """
        Estimate the ground-state energy of a molecule.

        Implementations report problems as an ``EnergyFailure`` instead of
        raising.

        Args:
            molecule: Molecule to evaluate
            config: Convergence and method settings for this call

        Returns:
            EnergySuccess with the energy in Hartree, or EnergyFailure
        """
        pass
