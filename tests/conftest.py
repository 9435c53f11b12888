import pytest

from fragbind.core.domain.models.molecule import make_molecule


@pytest.fixture
def hydrogen():
    return make_molecule(
        "H2", [("H", (0.0, 0.0, 0.0)), ("H", (0.0, 0.0, 0.74))], [(0, 1, 1.0)]
    )


@pytest.fixture
def hydrogen_fluoride():
    return make_molecule(
        "HF", [("H", (3.40, 0.0, 0.0)), ("F", (4.32, 0.0, 0.0))], [(0, 1, 1.0)]
    )


@pytest.fixture
def water():
    return make_molecule(
        "H2O",
        [
            ("O", (0.0, 0.0, 0.0)),
            ("H", (0.0, 0.757, 0.587)),
            ("H", (0.0, -0.757, 0.587)),
        ],
        [(0, 1, 1.0), (0, 2, 1.0)],
    )
