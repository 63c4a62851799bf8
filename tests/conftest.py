"""Pytest configuration and fixtures for the Cognito utility tests.

Provides configuration fixtures and boto3 patching so the facade can be
exercised without network access.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from cognito_util.config import CognitoEnvConfig  # noqa: E402
from cognito_util.config import CognitoEnvKey  # noqa: E402
from cognito_util.services.aws_clients import clear_client_cache  # noqa: E402
from mocks import TEST_REGION  # noqa: E402
from mocks import TEST_USER_POOL_ID  # noqa: E402


# --- Configuration Fixtures ---


@pytest.fixture
def cognito_env() -> CognitoEnvConfig:
    """A complete Cognito configuration."""
    return CognitoEnvConfig(
        {
            CognitoEnvKey.REGION: TEST_REGION,
            CognitoEnvKey.USER_POOL_ID: TEST_USER_POOL_ID,
        }
    )


@pytest.fixture
def env_without_pool_id() -> CognitoEnvConfig:
    """A configuration missing the user pool id."""
    return CognitoEnvConfig({CognitoEnvKey.REGION: TEST_REGION})


# --- Mock Fixtures ---


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client creation for AWS service calls."""
    return mocker.patch('boto3.client')


@pytest.fixture(autouse=True)
def _reset_client_cache():
    clear_client_cache()
    yield
    clear_client_cache()
