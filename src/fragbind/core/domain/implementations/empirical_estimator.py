"""Local reference estimator built on an empirical charge-equilibration model.

The energy of a molecule is modelled as

    E = sum(E_atom) - sum(D_bond * order) + min_q E_QEq(q)

where ``E_atom`` are Hartree-Fock-limit atomic energies, ``D_bond`` tabulated
single-bond dissociation energies and ``E_QEq`` the charge-equilibration energy
(Rappe & Goddard, 1991) minimised over partial charges that sum to the net
charge. The minimisation is an iterative conjugate-gradient search bounded by the
configuration's ``max_iterations`` and ``tolerance``.

Energies are illustrative only. They are useful to exercise the pipeline, not
to make chemical predictions.
"""

import logging
from typing import Dict, Mapping, Optional, Tuple

import numpy as np

from ..interfaces.energy_estimator import EnergyEstimator
from ..models.energy import (
    EnergyEstimationConfig,
    EnergyFailure,
    EnergyResult,
    EnergySuccess,
    GroundStateMethod,
)
from ..models.molecule import Molecule, count_electrons
from ....exceptions import UnknownElementError
from ...utils.periodic_table import normalize_symbol

logger = logging.getLogger(__name__)

EV_TO_HARTREE = 1.0 / 27.211386245988
ANGSTROM_TO_BOHR = 1.0 / 0.529177210903
KCAL_TO_HARTREE = 1.0 / 627.5

# Hartree-Fock limit energies of the isolated atoms (Hartree)
ATOMIC_ENERGIES: Dict[str, float] = {
    "H": -0.500000,
    "Li": -7.432727,
    "C": -37.688619,
    "N": -54.400934,
    "O": -74.809398,
    "F": -99.409349,
    "Na": -161.858912,
    "Mg": -199.614636,
    "P": -340.718781,
    "S": -397.504896,
    "Cl": -459.482072,
}

# Electronegativity and idempotential (eV)
QEQ_PARAMETERS: Dict[str, Tuple[float, float]] = {
    "H": (4.528, 13.890),
    "Li": (3.006, 4.772),
    "C": (5.343, 10.126),
    "N": (6.899, 11.760),
    "O": (8.741, 13.364),
    "F": (10.874, 14.948),
    "Na": (2.843, 4.592),
    "Mg": (3.951, 7.386),
    "P": (5.463, 8.000),
    "S": (6.928, 8.972),
    "Cl": (8.564, 9.892),
}

# Single-bond dissociation energies (kcal/mol), keyed by sorted element pair
BOND_ENERGIES: Dict[Tuple[str, str], float] = {
    ("H", "H"): 104.2,
    ("H", "Li"): 58.0,
    ("C", "H"): 98.8,
    ("H", "N"): 93.4,
    ("H", "O"): 110.6,
    ("F", "H"): 135.9,
    ("Cl", "H"): 103.2,
    ("H", "S"): 87.5,
    ("H", "P"): 77.0,
    ("C", "C"): 83.1,
    ("C", "N"): 72.8,
    ("C", "O"): 85.5,
    ("C", "S"): 65.0,
    ("C", "Cl"): 78.5,
    ("C", "F"): 116.0,
    ("N", "N"): 38.4,
    ("N", "O"): 48.0,
    ("O", "O"): 33.2,
}
DEFAULT_BOND_ENERGY = 80.0


class EmpiricalEnergyEstimator(EnergyEstimator):
    """Charge-equilibration reference estimator running in-process."""

    name = "empirical-qeq"
    supported_methods = (
        GroundStateMethod.VQE,
        GroundStateMethod.CLASSICAL_DFT,
        GroundStateMethod.AUTOMATIC,
    )

    def estimate(
        self, molecule: Molecule, config: EnergyEstimationConfig
    ) -> EnergyResult:
        if config.method not in self.supported_methods:
            return EnergyFailure(
                f"Method {config.method.name} is not supported by {self.name}"
            )
        if not molecule.atoms:
            return EnergyFailure(f"{molecule.name}: molecule has no atoms")

        try:
            electrons = count_electrons(molecule)
        except UnknownElementError as e:
            return EnergyFailure(f"{molecule.name}: {e}")
        if electrons <= 0:
            return EnergyFailure(
                f"{molecule.name}: non-positive electron count ({electrons})"
            )

        elements = [normalize_symbol(atom.element) for atom in molecule.atoms]
        qeq_parameters = dict(QEQ_PARAMETERS)
        if config.integral_provider is not None:
            qeq_parameters.update(_provider_parameters(config.integral_provider))
        missing = sorted(
            {e for e in elements if e not in ATOMIC_ENERGIES or e not in qeq_parameters}
        )
        if missing:
            return EnergyFailure(
                f"{molecule.name}: no empirical parameters for {', '.join(missing)}"
            )

        reference = sum(ATOMIC_ENERGIES[e] for e in elements)
        bonding = sum(
            _bond_energy(elements[b.atom1], elements[b.atom2]) * b.bond_order
            for b in molecule.bonds
        )

        chi = np.array([qeq_parameters[e][0] for e in elements]) * EV_TO_HARTREE
        hardness = np.array([qeq_parameters[e][1] for e in elements]) * EV_TO_HARTREE
        coulomb = _coulomb_matrix(molecule.get_coordinates(), hardness)

        initial = None
        if config.initial_parameters is not None:
            if len(config.initial_parameters) != molecule.num_atoms:
                return EnergyFailure(
                    f"{molecule.name}: expected {molecule.num_atoms} initial "
                    f"parameters, got {len(config.initial_parameters)}"
                )
            initial = np.array(config.initial_parameters, dtype=float)

        outcome = minimize_charge_energy(
            chi,
            coulomb,
            total_charge=molecule.charge,
            max_iterations=config.max_iterations,
            tolerance=config.tolerance,
            initial_charges=initial,
        )
        if isinstance(outcome, str):
            return EnergyFailure(f"{molecule.name}: {outcome}")

        electrostatic, charges, iterations = outcome
        logger.debug(
            "%s converged in %d iterations, charges=%s",
            molecule.name,
            iterations,
            np.round(charges, 4).tolist(),
        )
        return EnergySuccess(float(reference - bonding + electrostatic))


def minimize_charge_energy(
    chi: np.ndarray,
    coulomb: np.ndarray,
    total_charge: float,
    max_iterations: int,
    tolerance: float,
    initial_charges: Optional[np.ndarray] = None,
):
    """
    Minimise ``chi.q + 0.5 q.C.q`` subject to ``sum(q) == total_charge``.

    Conjugate-gradient search restricted to the charge-conserving subspace.

    Args:
        chi: Electronegativities (Hartree)
        coulomb: Hardness/shielded Coulomb matrix (Hartree)
        total_charge: Net charge the partial charges must sum to
        max_iterations: Maximum number of search steps
        tolerance: Stop once the energy changes by less than this
        initial_charges: Optional starting charges, projected onto the constraint

    Returns:
        ``(energy, charges, iterations)`` on convergence, otherwise a message
        describing why the search stopped
    """
    n = len(chi)
    if initial_charges is None:
        charges = np.full(n, total_charge / n)
    else:
        charges = initial_charges + (total_charge - initial_charges.sum()) / n

    def energy_of(q: np.ndarray) -> float:
        return float(chi @ q + 0.5 * q @ coulomb @ q)

    def residual_of(q: np.ndarray) -> np.ndarray:
        gradient = chi + coulomb @ q
        return -(gradient - gradient.mean())

    energy = energy_of(charges)
    residual = residual_of(charges)
    direction = residual
    for iteration in range(1, max_iterations + 1):
        rr = float(residual @ residual)
        if np.sqrt(rr) < 1e-12:
            return energy, charges, iteration

        curvature = float(direction @ coulomb @ direction)
        if curvature <= 0:
            return "charge-equilibration surface is not bounded below"
        charges = charges + (rr / curvature) * direction

        new_energy = energy_of(charges)
        if not np.isfinite(new_energy):
            return "charge-equilibration energy diverged"
        if abs(new_energy - energy) < tolerance:
            return new_energy, charges, iteration
        energy = new_energy

        new_residual = residual_of(charges)
        direction = new_residual + (float(new_residual @ new_residual) / rr) * direction
        residual = new_residual

    return f"did not converge within {max_iterations} iterations"


def _coulomb_matrix(coordinates: np.ndarray, hardness: np.ndarray) -> np.ndarray:
    """Hardness on the diagonal, Ohno-shielded Coulomb interactions elsewhere."""
    coords = coordinates * ANGSTROM_TO_BOHR
    diff = coords[:, None, :] - coords[None, :, :]
    r2 = np.sum(diff**2, axis=-1)
    shielding = 2.0 / (hardness[:, None] + hardness[None, :])
    matrix = 1.0 / np.sqrt(r2 + shielding**2)
    np.fill_diagonal(matrix, hardness)
    return matrix


def _bond_energy(element1: str, element2: str) -> float:
    pair = tuple(sorted((element1, element2)))
    return BOND_ENERGIES.get(pair, DEFAULT_BOND_ENERGY) * KCAL_TO_HARTREE


def _provider_parameters(provider) -> Mapping[str, Tuple[float, float]]:
    """Per-element ``(chi, J)`` overrides, in eV, from a mapping or callable."""
    if callable(provider):
        provider = provider()
    return {normalize_symbol(k): (float(v[0]), float(v[1])) for k, v in provider.items()}
