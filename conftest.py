import pytest


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch):
    """Keep a QDOCS_CONFIG from the caller's shell out of the tests."""
    monkeypatch.delenv("QDOCS_CONFIG", raising=False)
