"""
Shared fixtures for obs_authentication tests.
"""
import httpx
import pytest

from dashboard_config.types import AuthenticationConfiguration


@pytest.fixture
def auth_config():
    """Complete client-credentials configuration."""
    return AuthenticationConfiguration(
        TokenUrl="https://auth.example.com/connect/token",
        ClientId="dashboard",
        ClientSecret="s3cr3t",
        Scope="obsstamm.read",
    )


@pytest.fixture
def make_client():
    """Build an httpx.AsyncClient answering every request with handler."""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
