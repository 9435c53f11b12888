"""Service computing binding energy profiles for contact systems."""

import logging
from typing import Iterable, List, Optional

from tqdm.auto import tqdm

from .binding_energy import estimate_dissociation_constant, evaluate
from .estimation_client import EnergyEstimationClient
from .fragment_composer import compose
from ..domain.models.binding import ContactResult
from ..domain.models.contact_system import ContactSystem
from ..domain.models.energy import EnergyEstimationConfig
from ..domain.models.molecule import Molecule
from ...exceptions import EstimationFailureError
from ..utils.timing import Timer

logger = logging.getLogger(__name__)


def build_complex(contact: ContactSystem) -> Molecule:
    """Compose the antibody and antigen fragments of a contact into its complex."""
    return compose(
        contact.fragments,
        result_name=f"{contact.name} complex",
        result_charge=contact.complex_charge,
        result_multiplicity=contact.complex_multiplicity,
    )


class ContactScreeningService:
    """Service running fragment and complex estimations for contact systems."""

    def __init__(
        self,
        client: EnergyEstimationClient,
        config: Optional[EnergyEstimationConfig] = None,
        temperature: float = 300.0,
        max_workers: int = 3,
    ):
        """
        Initialize service.

        Args:
            client: Estimation client used for every molecule
            config: Estimation settings shared by all calls
            temperature: Temperature (K) used for dissociation constants
            max_workers: Concurrent estimations per contact
        """
        if temperature <= 0:
            raise ValueError(f"Temperature must be positive, got {temperature}")
        self._client = client
        self._config = config or EnergyEstimationConfig()
        self._temperature = temperature
        self._max_workers = max_workers

    def screen_contact(self, contact: ContactSystem) -> ContactResult:
        """
        Compute the binding energy profile of one contact.

        The antibody fragment, antigen fragment and complex are estimated
        independently. If any estimation fails the result carries the failure
        and no binding energy.
        """
        complex_molecule = build_complex(contact)
        with Timer(contact.name) as timer:
            antibody, antigen, complex_result = self._client.estimate_many(
                [contact.antibody_fragment, contact.antigen_fragment, complex_molecule],
                self._config,
                max_workers=self._max_workers,
            )

        result = ContactResult(
            contact=contact,
            antibody_energy=antibody.energy if antibody.is_success else None,
            antigen_energy=antigen.energy if antigen.is_success else None,
            complex_energy=complex_result.energy if complex_result.is_success else None,
            compute_time_seconds=timer.elapsed(),
        )

        try:
            result.binding = evaluate(
                complex_result,
                [antibody, antigen],
                names=[complex_molecule.name, *(m.name for m in contact.fragments)],
            )
        except EstimationFailureError as e:
            logger.warning("%s: binding energy unavailable: %s", contact.name, e)
            result.failure = str(e)
            return result

        result.dissociation_constant = estimate_dissociation_constant(
            result.binding.kcal_per_mol, self._temperature
        )
        logger.info(
            "%s: dE = %.2f kcal/mol (%s)",
            contact.name,
            result.binding.kcal_per_mol,
            result.binding.strength.label,
        )
        return result

    def screen(
        self, contacts: Iterable[ContactSystem], show_progress: bool = True
    ) -> List[ContactResult]:
        """Screen every contact in order."""
        contacts = list(contacts)
        results = []
        for contact in tqdm(
            contacts,
            desc="Screening contacts",
            unit="contact",
            disable=not show_progress,
        ):
            results.append(self.screen_contact(contact))
        return results


def rank_results(results: Iterable[ContactResult]) -> List[ContactResult]:
    """
    Order results strongest first.

    Favourable binding energies come first (most negative first), then
    unfavourable ones, then contacts whose estimation failed.
    """

    def sort_key(result: ContactResult):
        if result.binding is None:
            return (2, 0.0)
        kcal = result.binding.kcal_per_mol
        return (0 if kcal < 0.0 else 1, kcal)

    return sorted(results, key=sort_key)
