"""Repositories loading molecules and contact systems from files and presets."""
