# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for TFVC SDK tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import pytest
from azure.core.credentials import AzureKeyCredential

from AzureDevOps.Tfvc.core.config import TfvcConfig


@pytest.fixture
def dummy_auth():
    """Mock authentication object for testing."""

    class DummyAuth:
        def _authorization_header(self, scope=None):
            return "Bearer test_token_12345"

    return DummyAuth()


@pytest.fixture
def pat_credential():
    """Personal access token credential."""
    return AzureKeyCredential("pat-value")


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return TfvcConfig(
        http_retries=1,
        http_backoff=0.1,
        http_timeout=5,
    )


@pytest.fixture
def sample_base_url():
    """Standard test collection URL."""
    return "https://dev.azure.com/fabrikam"


@pytest.fixture
def sample_project_id():
    """Sample team project GUID for testing."""
    return "11111111-2222-3333-4444-555555555555"
