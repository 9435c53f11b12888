"""Domain models for energy estimation requests and outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union


class GroundStateMethod(Enum):
    """Ground-state estimation method requested from an estimator."""

    VQE = "vqe"
    QPE = "qpe"
    CLASSICAL_DFT = "classical-dft"
    AUTOMATIC = "automatic"


@dataclass(frozen=True)
class EnergyEstimationConfig:
    """
    Per-call configuration for a ground-state energy estimation.

    Attributes:
        method: Estimation method
        backend: Optional execution capability handed through to the estimator
        max_iterations: Cap on the estimator's own convergence loop
        tolerance: Energy convergence threshold in Hartree
        initial_parameters: Optional starting parameter vector
        error_mitigation: Optional error mitigation policy
        integral_provider: Optional override of the electronic-integral source
    """

    method: GroundStateMethod = GroundStateMethod.VQE
    backend: Optional[Any] = None
    max_iterations: int = 50
    tolerance: float = 1e-4
    initial_parameters: Optional[Tuple[float, ...]] = None
    error_mitigation: Optional[Any] = None
    integral_provider: Optional[Any] = None

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be a positive integer, got {self.max_iterations}"
            )
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.initial_parameters is not None:
            object.__setattr__(
                self,
                "initial_parameters",
                tuple(float(p) for p in self.initial_parameters),
            )


@dataclass(frozen=True)
class EnergySuccess:
    """A converged ground-state energy in Hartree."""

    energy: float

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class EnergyFailure:
    """An estimation that produced no energy."""

    message: str

    @property
    def is_success(self) -> bool:
        return False


EnergyResult = Union[EnergySuccess, EnergyFailure]
