"""Exceptions raised by the fragment binding pipeline."""


class FragbindError(Exception):
    """Base class for all fragbind errors."""


class UnknownElementError(FragbindError, KeyError):
    """Raised when an element symbol has no known atomic number."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown element symbol: {symbol!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidBondError(FragbindError, ValueError):
    """Raised when a bond references an atom index outside its molecule."""


class EmptyFragmentListError(FragbindError, ValueError):
    """Raised when composition is requested without any fragments."""


class EstimationFailureError(FragbindError):
    """Raised when a binding energy is requested from a failed estimation."""

    def __init__(self, message: str, molecule_name: str = ""):
        self.message = message
        self.molecule_name = molecule_name
        prefix = f"Estimation failed for {molecule_name}: " if molecule_name else ""
        super().__init__(prefix + message)
