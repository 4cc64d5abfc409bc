"""Shared fixtures for integration tests.

Integration modules skip themselves unless RUN_SOCIALGRAPH_NETWORK_TESTS=1.
"""

import os

import pytest


@pytest.fixture
def bearer_token() -> str:
    token = os.environ.get("SOCIALGRAPH_BEARER_TOKEN")
    if not token:
        pytest.skip("SOCIALGRAPH_BEARER_TOKEN is not set")
    return token
