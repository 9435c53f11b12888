"""Sources of molecules and contact systems."""

from .contact_repository import (
    builtin_presets,
    load_contacts_from_csv,
    select_contacts,
)
from .xyz_reader import read_xyz

__all__ = [
    "builtin_presets",
    "load_contacts_from_csv",
    "select_contacts",
    "read_xyz",
]
