# src/fragbind/core/utils/periodic_table.py
"""Element data lookups backed by RDKit's periodic table."""

from functools import lru_cache

from rdkit import Chem

from ...exceptions import UnknownElementError

_PERIODIC_TABLE = Chem.GetPeriodicTable()


def normalize_symbol(symbol: str) -> str:
    """Normalize capitalization of an element symbol ("CL" -> "Cl")."""
    symbol = symbol.strip()
    return symbol[:1].upper() + symbol[1:].lower()


@lru_cache(maxsize=None)
def atomic_number(symbol: str) -> int:
    """
    Look up the atomic number of an element.

    Args:
        symbol: Element symbol, matched case-insensitively

    Returns:
        Atomic number

    Raises:
        UnknownElementError: If RDKit does not know the symbol
    """
    normalized = normalize_symbol(symbol)
    if not normalized or not normalized.isalpha():
        raise UnknownElementError(symbol)
    try:
        number = _PERIODIC_TABLE.GetAtomicNumber(normalized)
    except (RuntimeError, ValueError) as exc:
        raise UnknownElementError(symbol) from exc
    if number < 1:
        raise UnknownElementError(symbol)
    return number


def atomic_weight(symbol: str) -> float:
    """Standard atomic weight in g/mol."""
    return _PERIODIC_TABLE.GetAtomicWeight(atomic_number(symbol))
