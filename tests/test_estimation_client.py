import threading
import time

import pytest

from fragbind.core.domain.implementations.function_estimator import FunctionEnergyEstimator
from fragbind.core.domain.interfaces.energy_estimator import EnergyEstimator
from fragbind.core.domain.models.energy import (
    EnergyEstimationConfig,
    EnergyFailure,
    EnergySuccess,
    GroundStateMethod,
)
from fragbind.core.services.estimation_client import EnergyEstimationClient


class RecordingEstimator(EnergyEstimator):
    """Returns a fixed result and records every call."""

    name = "recording"

    def __init__(self, result):
        self.result = result
        self.calls = []
        self._lock = threading.Lock()

    def estimate(self, molecule, config):
        with self._lock:
            self.calls.append((molecule, config))
        return self.result


class RaisingEstimator(EnergyEstimator):
    name = "raising"

    def estimate(self, molecule, config):
        raise RuntimeError("solver crashed")


def test_config_defaults():
    config = EnergyEstimationConfig()
    assert config.method is GroundStateMethod.VQE
    assert config.max_iterations == 50
    assert config.tolerance == 1e-4
    assert config.initial_parameters is None


@pytest.mark.parametrize(
    "kwargs",
    [{"max_iterations": 0}, {"tolerance": 0.0}, {"tolerance": -1e-6}],
)
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        EnergyEstimationConfig(**kwargs)


def test_initial_parameters_are_stored_as_tuple():
    config = EnergyEstimationConfig(initial_parameters=[0.1, -0.1])
    assert config.initial_parameters == (0.1, -0.1)


def test_estimate_calls_estimator_once_with_config(water):
    estimator = RecordingEstimator(EnergySuccess(-76.0))
    config = EnergyEstimationConfig(max_iterations=10, tolerance=1e-6)
    result = EnergyEstimationClient(estimator).estimate(water, config)

    assert result == EnergySuccess(-76.0)
    assert estimator.calls == [(water, config)]


def test_failure_is_returned_verbatim_without_retry(water):
    failure = EnergyFailure("did not converge within 10 iterations")
    estimator = RecordingEstimator(failure)
    result = EnergyEstimationClient(estimator).estimate(water, EnergyEstimationConfig())

    assert result is failure
    assert len(estimator.calls) == 1


def test_raising_estimator_becomes_failure(water):
    result = EnergyEstimationClient(RaisingEstimator()).estimate(water)
    assert isinstance(result, EnergyFailure)
    assert "solver crashed" in result.message


def test_estimate_many_preserves_order(hydrogen, water, hydrogen_fluoride):
    energies = {"H2": -1.1, "H2O": -76.0, "HF": -100.0}
    delays = {"H2": 0.05, "H2O": 0.0, "HF": 0.02}

    def solver(molecule, config):
        time.sleep(delays[molecule.name])
        return energies[molecule.name]

    client = EnergyEstimationClient(FunctionEnergyEstimator(solver))
    results = client.estimate_many([hydrogen, water, hydrogen_fluoride])
    assert [r.energy for r in results] == [-1.1, -76.0, -100.0]


def test_estimate_many_runs_concurrently(hydrogen, water):
    barrier = threading.Barrier(2, timeout=5)

    def solver(molecule, config):
        # both calls must be in flight at once to pass the barrier
        barrier.wait()
        return -1.0

    client = EnergyEstimationClient(FunctionEnergyEstimator(solver))
    results = client.estimate_many([hydrogen, water], max_workers=2)
    assert all(r.is_success for r in results)


def test_estimate_many_empty():
    client = EnergyEstimationClient(RecordingEstimator(EnergySuccess(0.0)))
    assert client.estimate_many([]) == []


def test_function_estimator_wraps_exceptions(water):
    def solver(molecule, config):
        raise ValueError("no integrals")

    result = FunctionEnergyEstimator(solver).estimate(water, EnergyEstimationConfig())
    assert result == EnergyFailure("ValueError: no integrals")


def test_function_estimator_rejects_non_finite(water):
    result = FunctionEnergyEstimator(lambda m, c: float("nan"), name="nan").estimate(
        water, EnergyEstimationConfig()
    )
    assert not result.is_success
    assert "non-finite" in result.message
