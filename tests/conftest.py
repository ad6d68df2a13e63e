"""
Pytest configuration and shared fixtures for job queue tests.
"""
import pytest
from typing import Any, Dict

from core.config.settings import Settings
from services.brokerages import create_default_registry
from services.job_queue import AlgorithmLocator, PythonPathRegistry


@pytest.fixture
def make_settings():
    """Factory for settings isolated from the developer's .env file."""
    def _create(**overrides: Any) -> Settings:
        values: Dict[str, Any] = {"close-automatically": True}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _create


@pytest.fixture
def test_settings(make_settings):
    """Backtest settings for a compiled algorithm."""
    return make_settings(**{
        "algorithm-language": "CSharp",
        "algorithm-type-name": "BasicTemplateAlgorithm",
        "api-access-token": "token-123",
        "job-user-id": 7,
        "job-project-id": 42,
        "job-organization-id": "org-1",
    })


@pytest.fixture
def search_path():
    """Stand-in for sys.path so tests don't touch the interpreter path."""
    return []


@pytest.fixture
def locator(search_path):
    return AlgorithmLocator(PythonPathRegistry(search_path=search_path))


@pytest.fixture
def registry(test_settings):
    return create_default_registry(test_settings)


@pytest.fixture
def algorithm_file(tmp_path):
    """Compiled algorithm artifact on disk."""
    path = tmp_path / "strategy.bin"
    path.write_bytes(b"\x00compiled-algorithm\x01")
    return path
