"""Fixtures for tests against a live Auth0 tenant."""

import os

import pytest
from auth0mgmt import ManagementAPI


@pytest.fixture
def integration_api():
    """Create a client from AUTH0_DOMAIN / AUTH0_API_TOKEN, or skip."""
    if not (os.environ.get("AUTH0_DOMAIN") and os.environ.get("AUTH0_API_TOKEN")):
        pytest.skip("AUTH0_DOMAIN and AUTH0_API_TOKEN are not set")

    with ManagementAPI.from_env(timeout=10.0) as api:
        yield api
