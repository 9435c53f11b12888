"""Command-line interface for CDR-epitope contact screening."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ...core.domain.implementations.empirical_estimator import EmpiricalEnergyEstimator
from ...core.domain.models.energy import EnergyEstimationConfig, GroundStateMethod
from ...core.services.contact_screening_service import (
    ContactScreeningService,
    rank_results,
)
from ...core.services.estimation_client import EnergyEstimationClient
from ...infrastructure.repositories.contact_repository import (
    builtin_presets,
    load_contacts_from_csv,
    select_contacts,
)
from . import reporting

logger = logging.getLogger(__name__)


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    root = logging.getLogger("fragbind")
    root.setLevel(level)
    if root.handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Compare CDR-epitope contact type binding energies "
        "from fragment and complex ground-state estimates"
    )
    parser.add_argument("--input", help="CSV file with custom contact systems")
    parser.add_argument(
        "--contacts",
        help="Comma-separated contact names to run (substring match, default: all)",
    )
    parser.add_argument(
        "--method",
        choices=[m.value for m in GroundStateMethod],
        default=GroundStateMethod.VQE.value,
        help="Ground-state estimation method",
    )
    parser.add_argument(
        "--max-iterations", type=int, default=50, help="Maximum estimator iterations"
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=1e-4,
        help="Energy convergence tolerance (Hartree)",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=300.0,
        help="Temperature for Kd estimation (Kelvin)",
    )
    parser.add_argument(
        "--workers", type=int, default=3, help="Concurrent estimations per contact"
    )
    parser.add_argument("--output", help="Write results to JSON file")
    parser.add_argument("--csv", help="Write results to CSV file")
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational output"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for contact screening CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    try:
        config = EnergyEstimationConfig(
            method=GroundStateMethod(args.method),
            max_iterations=args.max_iterations,
            tolerance=args.tolerance,
        )
    except ValueError as e:
        parser.error(str(e))

    if args.input:
        try:
            contacts = load_contacts_from_csv(args.input)
        except (OSError, ValueError) as e:
            print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
            return 1
    else:
        contacts = list(builtin_presets().values())
    filters = args.contacts.split(",") if args.contacts else None
    contacts = select_contacts(contacts, filters)

    if not contacts:
        available = ", ".join(sorted(builtin_presets()))
        print(
            f"Error: No contact systems selected. Available presets: {available}",
            file=sys.stderr,
        )
        return 1

    estimator = EmpiricalEnergyEstimator()
    service = ContactScreeningService(
        EnergyEstimationClient(estimator),
        config,
        temperature=args.temperature,
        max_workers=args.workers,
    )
    logger.info(
        "Screening %d contacts with %s (%d iterations, tol %g Ha)",
        len(contacts),
        estimator.name,
        config.max_iterations,
        config.tolerance,
    )

    ranked = rank_results(service.screen(contacts, show_progress=not args.quiet))
    reporting.print_table(ranked)

    rows = reporting.result_rows(ranked, args.temperature)
    if args.output:
        reporting.write_json(args.output, rows)
        logger.info("Results written to %s", args.output)
    if args.csv:
        reporting.write_csv(args.csv, rows)
        logger.info("Results written to %s", args.csv)

    return 0 if not any(r.has_failure for r in ranked) else 2


if __name__ == "__main__":
    sys.exit(main())
