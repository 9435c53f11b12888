"""Core business logic services."""

from .fragment_composer import compose
from .estimation_client import EnergyEstimationClient
from .binding_energy import (
    classify,
    combine,
    evaluate,
    to_kcal_per_mole,
    to_kj_per_mole,
)
from .contact_screening_service import (
    ContactScreeningService,
    build_complex,
    rank_results,
)

__all__ = [
    "compose",
    "EnergyEstimationClient",
    "classify",
    "combine",
    "evaluate",
    "to_kcal_per_mole",
    "to_kj_per_mole",
    "ContactScreeningService",
    "build_complex",
    "rank_results",
]
