"""Test configuration and common utilities.

Copyright (c) 2025 auth0mgmt contributors. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import respx
from auth0mgmt import ManagementAPI

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def base_url() -> str:
    """Return base URL for the test tenant.

    Returns:
        str: The base URL for testing.

    """
    return "https://tenant.example.com/"


@pytest.fixture
def api_token() -> str:
    """Return test Management API token.

    Returns:
        str: The API token for testing.

    """
    return "test-api-token-12345"


@pytest.fixture
def api(base_url: str, api_token: str) -> Generator[ManagementAPI, None, None]:
    """Create test client.

    Yields:
        ManagementAPI: Configured test client.

    """
    with ManagementAPI(base_url, api_token, timeout=5.0) as api:
        yield api


@pytest.fixture
def mock_api() -> Generator[respx.MockRouter, None, None]:
    """Mock the tenant's HTTP responses.

    Yields:
        The mock router for HTTP requests.

    """
    with respx.mock(
        base_url="https://tenant.example.com", assert_all_called=False
    ) as router:
        yield router


@pytest.fixture
def sample_rule_data() -> dict[str, Any]:
    """Sample rule data for testing.

    Returns:
        dict[str, Any]: Sample rule data.

    """
    return {
        "id": "rul_123",
        "name": "add-roles",
        "script": "function (user, context, callback) { callback(null, user, context); }",
        "order": 1,
        "enabled": True,
        "stage": "login_success",
    }


@pytest.fixture
def sample_user_data() -> dict[str, Any]:
    """Sample user data for testing.

    Returns:
        dict[str, Any]: Sample user data.

    """
    return {
        "user_id": "auth0|123",
        "email": "test@example.com",
        "email_verified": True,
        "username": "testuser",
        "name": "Test User",
        "identities": [
            {
                "connection": "Username-Password-Authentication",
                "user_id": "123",
                "provider": "auth0",
                "isSocial": False,
            },
        ],
        "app_metadata": {"plan": "free"},
        "created_at": "2024-01-01T00:00:00.000Z",
        "logins_count": 3,
    }


@pytest.fixture
def sample_error_response() -> dict[str, Any]:
    """Sample error response.

    Returns:
        dict[str, Any]: Sample error response data.

    """
    return {
        "statusCode": 400,
        "error": "Bad Request",
        "message": "Payload validation error: 'Missing required property: script'.",
        "errorCode": "invalid_body",
    }
