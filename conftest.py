"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Logfire observability configuration (local only)
- No real model requests from pydantic-ai
- Shared fixtures across all tests
"""

import sys
from pathlib import Path

import logfire
import pytest


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring external services"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    logfire.configure(
        service_name="quill_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )

    # Ensure pydantic-ai agents emit detailed spans (inputs/outputs) in tests
    logfire.instrument_pydantic_ai()

    # Any test that reaches a real provider fails instead of calling the network
    from pydantic_ai import models
    models.ALLOW_MODEL_REQUESTS = False

    logfire.info(
        "Starting test suite",
        project_root=str(project_root),
    )


def pytest_sessionfinish(session, exitstatus):
    """Log test session completion with summary statistics."""
    logfire.info(
        "Test suite completed",
        exit_status=exitstatus,
        tests_collected=session.testscollected,
        tests_failed=session.testsfailed,
    )


# ============================================================================
# Shared Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"OPENROUTER_API_KEY": "test-key", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars


@pytest.fixture
def make_client():
    """Build a GenerationClient backed by a pydantic-ai test model.

    Usage:
        client = make_client("Subject: Hi\\n\\nDear Sam,\\nThanks.")
        client = make_client(function=my_function_model_callback)
    """
    from pydantic_ai.models.function import FunctionModel
    from pydantic_ai.models.test import TestModel

    from services.generation_client import GenerationClient

    def _make(output_text: str = None, function=None) -> GenerationClient:
        if function is not None:
            model = FunctionModel(function)
        else:
            model = TestModel(custom_output_text=output_text)
        return GenerationClient(
            api_key="test-key",
            model_name="test-model",
            model=model,
        )

    return _make
