"""Binding energy aggregation, unit conversion and classification."""

import math
from typing import Optional, Sequence

from ..domain.models.binding import BindingEnergy, BindingStrength
from ..domain.models.energy import EnergyFailure, EnergyResult
from ...exceptions import EstimationFailureError

HARTREE_TO_KCAL_PER_MOL = 627.5
HARTREE_TO_KJ_PER_MOL = 2625.5
GAS_CONSTANT_KCAL = 1.987e-3  # kcal/(mol*K)

# Evaluated top-down, first match wins; a value equal to a bound falls through
CLASSIFICATION_THRESHOLDS = (
    (-4.0, BindingStrength.STRONG),
    (-2.0, BindingStrength.MODERATE),
    (0.0, BindingStrength.WEAK),
)


def binding_energy(complex_energy: float, fragment_energies: Sequence[float]) -> float:
    """
    Energy of the complex minus the energies of its isolated fragments.

    No compensation for cancellation is attempted: the inputs are typically
    tens to hundreds of Hartree while the difference is a fraction of one, so
    the estimator's precision carries straight into the result.
    """
    return complex_energy - math.fsum(fragment_energies)


def to_kcal_per_mole(hartree: float) -> float:
    return hartree * HARTREE_TO_KCAL_PER_MOL


def to_kj_per_mole(hartree: float) -> float:
    return hartree * HARTREE_TO_KJ_PER_MOL


def classify(binding_energy_kcal: float) -> BindingStrength:
    """Map a binding energy in kcal/mol to its strength bucket."""
    for bound, strength in CLASSIFICATION_THRESHOLDS:
        if binding_energy_kcal < bound:
            return strength
    return BindingStrength.UNFAVORABLE


def combine(
    complex_result: EnergyResult,
    fragment_results: Sequence[EnergyResult],
    names: Optional[Sequence[str]] = None,
) -> float:
    """
    Binding energy in Hartree from estimation results.

    Args:
        complex_result: Estimation result of the complex
        fragment_results: Estimation results of the isolated fragments
        names: Optional molecule names, complex first, used to say which
            estimates failed

    Returns:
        Binding energy in Hartree

    Raises:
        EstimationFailureError: If any of the results is a failure. The error
            carries every failure message; no energy is substituted.
    """
    results = (complex_result, *fragment_results)
    if names is not None and len(names) != len(results):
        raise ValueError(f"Expected {len(results)} names, got {len(names)}")
    labels = list(names) if names is not None else [""] * len(results)

    failures = [
        (label, result.message)
        for label, result in zip(labels, results)
        if isinstance(result, EnergyFailure)
    ]
    if failures:
        failed_names = ", ".join(label for label, _ in failures if label)
        if len(failures) == 1:
            message = failures[0][1]
        else:
            message = "; ".join(
                f"{label}: {text}" if label else text for label, text in failures
            )
        raise EstimationFailureError(message, molecule_name=failed_names)
    return binding_energy(
        complex_result.energy, [result.energy for result in fragment_results]
    )


def evaluate(
    complex_result: EnergyResult,
    fragment_results: Sequence[EnergyResult],
    names: Optional[Sequence[str]] = None,
) -> BindingEnergy:
    """Combine, convert and classify in one step."""
    hartree = combine(complex_result, fragment_results, names)
    kcal = to_kcal_per_mole(hartree)
    return BindingEnergy(
        hartree=hartree,
        kcal_per_mol=kcal,
        kj_per_mol=to_kj_per_mole(hartree),
        strength=classify(kcal),
    )


def estimate_dissociation_constant(
    binding_energy_kcal: float, temperature_k: float = 300.0
) -> Optional[float]:
    """
    Rough dissociation constant (M) from a binding energy.

    Entropy is neglected (dG ~ dE), so ``Kd = exp(dE / RT)``. Returns None for
    unfavourable binding.
    """
    if temperature_k <= 0:
        raise ValueError(f"Temperature must be positive, got {temperature_k}")
    if binding_energy_kcal >= 0.0:
        return None
    return math.exp(binding_energy_kcal / (GAS_CONSTANT_KCAL * temperature_k))


def describe_dissociation_constant(kd: Optional[float]) -> str:
    if kd is None:
        return "N/A (unfavorable)"
    if kd < 1e-9:
        scale = "picomolar"
    elif kd < 1e-6:
        scale = "nanomolar"
    elif kd < 1e-3:
        scale = "micromolar"
    else:
        scale = "millimolar"
    return f"{kd:.2e} M ({scale})"
