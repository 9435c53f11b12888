"""Energy estimator implementations."""

from .empirical_estimator import EmpiricalEnergyEstimator
from .function_estimator import FunctionEnergyEstimator

__all__ = ["EmpiricalEnergyEstimator", "FunctionEnergyEstimator"]
