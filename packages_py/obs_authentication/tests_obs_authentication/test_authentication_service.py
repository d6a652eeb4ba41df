"""
Tests for AuthenticationService (service.py)
Logic testing: Decision/Branch, State, Path coverage
"""
import asyncio
import logging
from urllib.parse import parse_qs

import httpx
import pytest

from dashboard_config.types import AuthenticationConfiguration
from obs_authentication import AuthenticationError, AuthenticationService


def _token_response(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"access_token": "tok123", "token_type": "Bearer"})


class TestGetAccessToken:
    """Tests for AuthenticationService.get_access_token."""

    # Happy Path: token returned
    @pytest.mark.asyncio
    async def test_returns_token(self, auth_config, make_client):
        seen = []

        def handler(request):
            seen.append(request)
            return _token_response(request)

        service = AuthenticationService(auth_config, make_client(handler))

        token = await service.get_access_token()

        assert token == "tok123"
        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert str(seen[0].url) == "https://auth.example.com/connect/token"
        form = parse_qs(seen[0].content.decode())
        assert form["grant_type"] == ["client_credentials"]
        assert form["client_id"] == ["dashboard"]
        assert form["client_secret"] == ["s3cr3t"]
        assert form["scope"] == ["obsstamm.read"]
        assert "audience" not in form

    # Decision: secret from environment variable
    @pytest.mark.asyncio
    async def test_secret_from_environment(self, make_client, monkeypatch):
        monkeypatch.setenv("OBS_CLIENT_SECRET", "from-env")
        config = AuthenticationConfiguration(
            TokenUrl="https://auth.example.com/token",
            ClientId="dashboard",
            EnvClientSecret="OBS_CLIENT_SECRET",
        )
        forms = []

        def handler(request):
            forms.append(parse_qs(request.content.decode()))
            return _token_response(request)

        token = await AuthenticationService(config, make_client(handler)).get_access_token()

        assert token == "tok123"
        assert forms[0]["client_secret"] == ["from-env"]

    # Error Path: no secret anywhere
    @pytest.mark.asyncio
    async def test_missing_secret(self, make_client, monkeypatch):
        monkeypatch.delenv("OBS_CLIENT_SECRET", raising=False)
        config = AuthenticationConfiguration(
            TokenUrl="https://auth.example.com/token",
            ClientId="dashboard",
            EnvClientSecret="OBS_CLIENT_SECRET",
        )
        service = AuthenticationService(config, make_client(_token_response))

        with pytest.raises(AuthenticationError, match="No client secret"):
            await service.get_access_token()

    # Error Path: no token URL
    @pytest.mark.asyncio
    async def test_missing_token_url(self, make_client):
        config = AuthenticationConfiguration(ClientId="dashboard", ClientSecret="x")
        service = AuthenticationService(config, make_client(_token_response))

        with pytest.raises(AuthenticationError, match="TokenUrl"):
            await service.get_access_token()

    # Error Path: transport failure is wrapped and chained
    @pytest.mark.asyncio
    async def test_network_failure(self, auth_config, make_client, caplog):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        service = AuthenticationService(auth_config, make_client(handler))

        with caplog.at_level(logging.ERROR, logger="obs_authentication.service"):
            with pytest.raises(AuthenticationError) as exc_info:
                await service.get_access_token()

        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.__cause__ is exc_info.value.cause
        assert "failed" in caplog.text

    # Error Path: rejected credentials
    @pytest.mark.asyncio
    async def test_unauthorized(self, auth_config, make_client):
        service = AuthenticationService(
            auth_config, make_client(lambda request: httpx.Response(401, json={"error": "invalid_client"}))
        )

        with pytest.raises(AuthenticationError) as exc_info:
            await service.get_access_token()

        assert exc_info.value.status_code == 401
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    # Error Path: body is not JSON
    @pytest.mark.asyncio
    async def test_body_not_json(self, auth_config, make_client):
        service = AuthenticationService(
            auth_config, make_client(lambda request: httpx.Response(200, text="<html>"))
        )

        with pytest.raises(AuthenticationError, match="not JSON"):
            await service.get_access_token()

    # Error Path: JSON without access_token
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"token_type": "Bearer"}, {"access_token": ""}, {"access_token": 42}, ["tok123"]],
    )
    async def test_missing_access_token(self, auth_config, make_client, payload):
        service = AuthenticationService(
            auth_config, make_client(lambda request: httpx.Response(200, json=payload))
        )

        with pytest.raises(AuthenticationError, match="no access_token") as exc_info:
            await service.get_access_token()

        assert exc_info.value.cause is not None
        assert exc_info.value.__cause__ is exc_info.value.cause
        assert exc_info.value.status_code == 200

    # State: every call fetches a fresh token
    @pytest.mark.asyncio
    async def test_no_caching(self, auth_config, make_client):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"access_token": f"tok{len(calls)}"})

        service = AuthenticationService(auth_config, make_client(handler))

        assert await service.get_access_token() == "tok1"
        assert await service.get_access_token() == "tok2"

    # Path: secret never logged in clear
    @pytest.mark.asyncio
    async def test_token_masked_in_logs(self, auth_config, make_client, caplog):
        service = AuthenticationService(
            auth_config,
            make_client(lambda request: httpx.Response(200, json={"access_token": "verysecrettoken"})),
        )

        with caplog.at_level(logging.DEBUG, logger="obs_authentication.service"):
            await service.get_access_token()

        assert "verysecrettoken" not in caplog.text
        assert "very***********" in caplog.text


class TestCancellation:
    """Tests for cancellation of the token request."""

    # Path: event already set
    @pytest.mark.asyncio
    async def test_cancelled_before_start(self, auth_config, make_client):
        calls = []

        def handler(request):
            calls.append(request)
            return _token_response(request)

        cancellation = asyncio.Event()
        cancellation.set()
        service = AuthenticationService(auth_config, make_client(handler))

        with pytest.raises(asyncio.CancelledError):
            await service.get_access_token(cancellation)

        assert calls == []

    # State: event set while the request is pending
    @pytest.mark.asyncio
    async def test_cancelled_while_pending(self, auth_config, make_client):
        started = asyncio.Event()
        never = asyncio.Event()

        async def handler(request):
            started.set()
            await never.wait()
            return _token_response(request)

        cancellation = asyncio.Event()
        service = AuthenticationService(auth_config, make_client(handler))

        task = asyncio.ensure_future(service.get_access_token(cancellation))
        await started.wait()
        cancellation.set()

        with pytest.raises(asyncio.CancelledError):
            await task

    # Happy Path: event never set
    @pytest.mark.asyncio
    async def test_completes_when_not_cancelled(self, auth_config, make_client):
        service = AuthenticationService(auth_config, make_client(_token_response))

        token = await service.get_access_token(asyncio.Event())

        assert token == "tok123"
