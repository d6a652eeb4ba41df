"""
Access token retrieval from the OBS authentication service.

The service speaks OAuth2 ``client_credentials``: a form POST to the
configured token endpoint answered by a JSON body carrying ``access_token``.
Tokens are treated as opaque strings. Nothing is cached and nothing is
retried here; callers that want retries wrap get_access_token().
"""
import asyncio
import logging
import os
from typing import Any, Dict, Optional

import httpx

from dashboard_config.types import AuthenticationConfiguration

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def _mask_sensitive(value: Optional[str], visible_chars: int = 4) -> str:
    """Mask sensitive values for safe logging."""
    if value is None:
        return "<None>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


class AuthenticationService:
    """
    Obtains bearer tokens for calls to OBS backend services.

    Args:
        config: Authentication section of the dashboard configuration
        http_client: Shared httpx.AsyncClient used for the token request
    """

    def __init__(
        self,
        config: AuthenticationConfiguration,
        http_client: httpx.AsyncClient,
    ) -> None:
        self._config = config
        self._http_client = http_client
        logger.debug(
            f"AuthenticationService.__init__: token_url={config.token_url}, "
            f"client_id={config.client_id}"
        )

    def _resolve_client_secret(self) -> Optional[str]:
        """Return the literal secret, else the one named by EnvClientSecret."""
        if self._config.client_secret:
            return self._config.client_secret
        if self._config.env_client_secret:
            secret = os.environ.get(self._config.env_client_secret)
            logger.debug(
                f"AuthenticationService._resolve_client_secret: "
                f"{self._config.env_client_secret} -> {_mask_sensitive(secret)}"
            )
            return secret or None
        return None

    def _build_form(self) -> Dict[str, str]:
        if not self._config.token_url:
            raise AuthenticationError("Authentication.TokenUrl is not configured")
        if not self._config.client_id:
            raise AuthenticationError("Authentication.ClientId is not configured")

        secret = self._resolve_client_secret()
        if not secret:
            raise AuthenticationError(
                "No client secret available: set Authentication.ClientSecret "
                "or the variable named by Authentication.EnvClientSecret"
            )

        form = {
            "grant_type": "client_credentials",
            "client_id": self._config.client_id,
            "client_secret": secret,
        }
        if self._config.scope:
            form["scope"] = self._config.scope
        if self._config.audience:
            form["audience"] = self._config.audience
        return form

    async def _request_token(self) -> str:
        form = self._build_form()
        token_url = self._config.token_url
        logger.info(f"AuthenticationService: Requesting access token from {token_url}")

        try:
            response = await self._http_client.post(
                token_url,
                data=form,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                f"AuthenticationService: Token endpoint answered "
                f"{status_code} {e.response.reason_phrase}"
            )
            raise AuthenticationError(
                f"Token endpoint answered {status_code} {e.response.reason_phrase}",
                cause=e,
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"AuthenticationService: Token request to {token_url} failed: {e}")
            raise AuthenticationError(
                f"Token request to {token_url} failed: {e}", cause=e
            ) from e

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise AuthenticationError(
                "Token endpoint returned a body that is not JSON",
                cause=e,
                status_code=response.status_code,
            ) from e

        try:
            token = payload["access_token"]
            if not isinstance(token, str) or not token:
                raise TypeError(f"access_token is {type(token).__name__}, not a non-empty string")
        except (KeyError, TypeError) as e:
            raise AuthenticationError(
                "Token endpoint response has no access_token",
                cause=e,
                status_code=response.status_code,
            ) from e

        logger.debug(
            f"AuthenticationService: Received access token "
            f"(length={len(token)}, masked={_mask_sensitive(token)})"
        )
        return token

    async def get_access_token(
        self,
        cancellation: Optional[asyncio.Event] = None,
    ) -> str:
        """
        Obtain a fresh access token.

        Args:
            cancellation: Optional event; once set, the pending request is
                abandoned and asyncio.CancelledError is raised

        Returns:
            The bearer token

        Raises:
            AuthenticationError: Transport failure or unusable response
            asyncio.CancelledError: The request was cancelled
        """
        if cancellation is None:
            return await self._request_token()

        if cancellation.is_set():
            logger.info("AuthenticationService: Token request cancelled before start")
            raise asyncio.CancelledError("token request cancelled")

        request_task = asyncio.ensure_future(self._request_token())
        cancel_task = asyncio.ensure_future(cancellation.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            pending = [task for task in (request_task, cancel_task) if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        if request_task in done:
            return request_task.result()

        logger.info("AuthenticationService: Token request cancelled")
        raise asyncio.CancelledError("token request cancelled")
