"""Energy estimator that delegates to a plain callable."""

import logging
import math
from typing import Callable

from ..interfaces.energy_estimator import EnergyEstimator
from ..models.energy import (
    EnergyEstimationConfig,
    EnergyFailure,
    EnergyResult,
    EnergySuccess,
)
from ..models.molecule import Molecule

logger = logging.getLogger(__name__)

EnergyFunction = Callable[[Molecule, EnergyEstimationConfig], float]


class FunctionEnergyEstimator(EnergyEstimator):
    """Adapter turning ``func(molecule, config) -> float`` into an estimator.

    Used to plug an external solver into the pipeline. Any exception raised by
    the solver, and any non-finite energy, is reported as an EnergyFailure.
    """

    def __init__(self, func: EnergyFunction, name: str = ""):
        self._func = func
        self.name = name or getattr(func, "__name__", "function")

    def estimate(
        self, molecule: Molecule, config: EnergyEstimationConfig
    ) -> EnergyResult:
        try:
            energy = float(self._func(molecule, config))
        except Exception as e:
            logger.debug(
                "Solver %s raised for %s", self.name, molecule.name, exc_info=True
            )
            return EnergyFailure(f"{type(e).__name__}: {e}")

        if not math.isfinite(energy):
            return EnergyFailure(f"{self.name} returned a non-finite energy ({energy})")
        return EnergySuccess(energy)
