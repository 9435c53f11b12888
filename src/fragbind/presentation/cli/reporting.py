"""Text, JSON and CSV reports of screening results."""

import json
import sys
from typing import Dict, List, Optional, Sequence, TextIO

import pandas as pd

from ...core.domain.models.binding import ContactResult
from ...core.services.binding_energy import describe_dissociation_constant

REPORT_COLUMNS = [
    "rank",
    "contact",
    "contact_type",
    "cdr_region",
    "description",
    "binding_energy_hartree",
    "binding_energy_kcal_mol",
    "binding_energy_kj_mol",
    "estimated_kd",
    "interpretation",
    "antibody_energy_ha",
    "antigen_energy_ha",
    "complex_energy_ha",
    "compute_time_s",
    "temperature_k",
    "has_failure",
    "failure",
]


def _fmt(value: Optional[float], spec: str) -> str:
    return "" if value is None else format(value, spec)


def interpretation(result: ContactResult) -> str:
    if result.binding is None:
        return "ESTIMATION FAILED"
    return result.binding.strength.label


def result_rows(
    ranked: Sequence[ContactResult], temperature: float
) -> List[Dict[str, str]]:
    """One flat row per result; failed energies are left blank, never zero."""
    rows = []
    for rank, result in enumerate(ranked, start=1):
        binding = result.binding
        rows.append(
            {
                "rank": str(rank),
                "contact": result.contact.name,
                "contact_type": result.contact.interaction_type.display_name,
                "cdr_region": result.contact.region.value,
                "description": result.contact.description,
                "binding_energy_hartree": _fmt(binding and binding.hartree, ".6f"),
                "binding_energy_kcal_mol": _fmt(binding and binding.kcal_per_mol, ".2f"),
                "binding_energy_kj_mol": _fmt(binding and binding.kj_per_mol, ".2f"),
                "estimated_kd": (
                    describe_dissociation_constant(result.dissociation_constant)
                    if binding
                    else "N/A (estimation failed)"
                ),
                "interpretation": interpretation(result),
                "antibody_energy_ha": _fmt(result.antibody_energy, ".6f"),
                "antigen_energy_ha": _fmt(result.antigen_energy, ".6f"),
                "complex_energy_ha": _fmt(result.complex_energy, ".6f"),
                "compute_time_s": f"{result.compute_time_seconds:.1f}",
                "temperature_k": f"{temperature:.1f}",
                "has_failure": str(result.has_failure),
                "failure": result.failure or "",
            }
        )
    return rows


def print_table(ranked: Sequence[ContactResult], out: TextIO = sys.stdout) -> None:
    """Print the ranked comparison table."""
    header = (
        f"  {'#':<4}  {'Contact':<16}  {'Type':<14}  {'CDR':<5}  "
        f"{'dE (kcal/mol)':>13}  {'dE (kJ/mol)':>13}  Interpretation"
    )
    print(header, file=out)
    print("  " + "=" * (len(header) - 2), file=out)
    for rank, result in enumerate(ranked, start=1):
        binding = result.binding
        kcal = f"{binding.kcal_per_mol:13.2f}" if binding else f"{'-':>13}"
        kj = f"{binding.kj_per_mol:13.2f}" if binding else f"{'-':>13}"
        print(
            f"  {rank:<4}  {result.contact.name:<16}  "
            f"{result.contact.interaction_type.display_name:<14}  "
            f"{result.contact.region.value:<5}  {kcal}  {kj}  {interpretation(result)}",
            file=out,
        )
    print(file=out)


def write_json(path: str, rows: List[Dict[str, str]]) -> None:
    with open(path, "w") as f:
        json.dump(rows, f, indent=2)


def write_csv(path: str, rows: List[Dict[str, str]]) -> None:
    pd.DataFrame(rows, columns=REPORT_COLUMNS).to_csv(path, index=False)
