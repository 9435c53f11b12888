"""Interfaces for pluggable domain capabilities."""

from .energy_estimator import EnergyEstimator

__all__ = ["EnergyEstimator"]
