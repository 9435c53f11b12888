"""Client invoking an energy estimation capability once per molecule."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..domain.interfaces.energy_estimator import EnergyEstimator
from ..domain.models.energy import EnergyEstimationConfig, EnergyFailure, EnergyResult
from ..domain.models.molecule import Molecule
from ..utils.timing import Timer

logger = logging.getLogger(__name__)


class EnergyEstimationClient:
    """Service passing molecules and configuration to an estimator.

    Each call reaches the estimator exactly once. Failures are returned to the
    caller unchanged; the estimator owns its own convergence loop, so nothing
    is retried here.
    """

    def __init__(self, estimator: EnergyEstimator):
        """Initialize client with the estimation capability to use."""
        self._estimator = estimator

    @property
    def estimator(self) -> EnergyEstimator:
        return self._estimator

    def estimate(
        self, molecule: Molecule, config: Optional[EnergyEstimationConfig] = None
    ) -> EnergyResult:
        """
        Estimate the ground-state energy of one molecule.

        Args:
            molecule: Molecule to evaluate
            config: Estimation settings; defaults to EnergyEstimationConfig()

        Returns:
            EnergySuccess or EnergyFailure
        """
        config = config or EnergyEstimationConfig()
        with Timer(molecule.name) as timer:
            try:
                result = self._estimator.estimate(molecule, config)
            except Exception as e:
                # estimators should report failures as values; keep the contract
                logger.exception(
                    "Estimator %s raised for %s", self._estimator.name, molecule.name
                )
                result = EnergyFailure(f"{type(e).__name__}: {e}")

        if result.is_success:
            logger.info(
                "%s: E = %.6f Ha (%.2fs)", molecule.name, result.energy, timer.elapsed()
            )
        else:
            logger.warning(
                "%s: estimation failed after %.2fs: %s",
                molecule.name,
                timer.elapsed(),
                result.message,
            )
        return result

    def estimate_many(
        self,
        molecules: Sequence[Molecule],
        config: Optional[EnergyEstimationConfig] = None,
        max_workers: Optional[int] = None,
    ) -> List[EnergyResult]:
        """
        Estimate several independent molecules concurrently.

        Args:
            molecules: Molecules to evaluate
            config: Estimation settings shared by every call
            max_workers: Thread pool size; defaults to one worker per molecule

        Returns:
            Results in the same order as ``molecules``
        """
        if not molecules:
            return []
        workers = max_workers or len(molecules)
        if workers == 1:
            return [self.estimate(molecule, config) for molecule in molecules]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self.estimate, molecule, config)
                for molecule in molecules
            ]
            return [future.result() for future in futures]
