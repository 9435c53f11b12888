"""Command-line interface modules."""

from .screen_contacts import main as screen_contacts_main

__all__ = ["screen_contacts_main"]
