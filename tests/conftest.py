import pytest

import sample_drivers

pytest_plugins = ["driver_kernel.testing.fixtures"]


@pytest.fixture(autouse=True)
def _reset_broken_store():
    sample_drivers.BrokenStore.fail = True
    sample_drivers.BrokenStore.attempts = 0
    yield
