"""Shared fixtures for the TaxIQ calculator test suite."""

import pytest
from fastapi.testclient import TestClient

from backend.tax_engine.slabs import Regime


@pytest.fixture(scope="session")
def client():
    from backend.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture(params=list(Regime), ids=lambda r: r.value)
def regime(request) -> Regime:
    return request.param


@pytest.fixture
def high_earner() -> dict:
    """Old-regime salaried individual above the 1 crore surcharge line."""
    return {"income": 15_000_000, "age": 45}
