"""
Shared fixtures for stamm_client tests.
"""
import httpx
import pytest

from stamm_client import Configuration


@pytest.fixture
def base_configuration():
    """A complete configuration as a client starts with."""
    return Configuration(
        base_path="https://obsstamm.internal/api",
        user_agent="OBS-Stamm-Client/python",
        timeout=30.0,
        default_headers={"X-Tenant": "obs"},
        api_key={},
        api_key_prefix={},
    )


@pytest.fixture
def recorder():
    """Record requests and answer them from a handler."""

    class Recorder:
        def __init__(self):
            self.requests = []
            self.handler = lambda request: httpx.Response(200, json=[])

        def __call__(self, request):
            self.requests.append(request)
            return self.handler(request)

        def client(self):
            return httpx.AsyncClient(transport=httpx.MockTransport(self))

    return Recorder()
