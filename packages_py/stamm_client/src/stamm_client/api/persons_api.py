"""
Persons endpoints of the OBS-Stamm API.
"""
import base64
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..configuration import Configuration, merge_configurations
from ..exceptions import StammApiError

logger = logging.getLogger(__name__)


class PersonsApi:
    """Asynchronous client for /persons.

    The active configuration can be replaced at any time through the
    ``configuration`` property; it is read on every request.

    Args:
        base_path: Base URL of the OBS-Stamm service
        configuration: Initial configuration (default: Configuration.default())
        http_client: Shared httpx.AsyncClient; when omitted the client
            creates and owns one
    """

    def __init__(
        self,
        base_path: Optional[str] = None,
        configuration: Optional[Configuration] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if configuration is None:
            configuration = Configuration.default(base_path)
        elif base_path:
            configuration = merge_configurations(Configuration(base_path=base_path), configuration)
        self._configuration = configuration
        self._client = http_client
        self._owns_client = http_client is None
        self._closed = False

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @configuration.setter
    def configuration(self, value: Configuration) -> None:
        if not isinstance(value, Configuration):
            raise TypeError(f"configuration must be a Configuration, got {type(value).__name__}")
        logger.debug(f"PersonsApi.configuration: Installing {value!r}")
        self._configuration = value

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    def _build_headers(self) -> Dict[str, str]:
        config = self._configuration
        headers = {"Accept": "application/json"}
        if config.user_agent:
            headers["User-Agent"] = config.user_agent
        headers.update(config.default_headers or {})

        for header_name, key in (config.api_key or {}).items():
            prefix = (config.api_key_prefix or {}).get(header_name)
            headers[header_name] = f"{prefix} {key}" if prefix else key

        if config.access_token:
            headers["Authorization"] = f"Bearer {config.access_token}"
        elif config.username and config.password:
            credentials = f"{config.username}:{config.password}".encode("utf-8")
            headers["Authorization"] = f"Basic {base64.b64encode(credentials).decode('ascii')}"
        return headers

    def _build_url(self, path: str) -> str:
        base_path = self._configuration.base_path
        if not base_path:
            raise StammApiError("PersonsApi has no base_path configured")
        return f"{base_path.rstrip('/')}/{path.lstrip('/')}"

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if self._closed:
            raise RuntimeError("Client has been closed")

        url = self._build_url(path)
        logger.debug(f"PersonsApi._request: {method} {url} params={params}")

        try:
            response = await self._get_client().request(
                method,
                url,
                params=params,
                headers=self._build_headers(),
                timeout=self._configuration.timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"PersonsApi._request: {method} {url} failed: {e}")
            raise StammApiError(f"{method} {url} failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = response.text

        if not response.is_success:
            logger.warning(f"PersonsApi._request: {method} {url} -> {response.status_code}")
            raise StammApiError(
                f"{method} {url} answered {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                body=data,
            )
        return data

    async def get_persons(self, active_only: bool = True) -> List[Dict[str, Any]]:
        """
        List persons.

        Args:
            active_only: Only return persons with an active employment

        Returns:
            Person records as returned by the service
        """
        data = await self._request("GET", "persons", params={"active": str(active_only).lower()})
        if not isinstance(data, list):
            raise StammApiError("GET persons did not return a list", body=data)
        return data

    async def get_person(self, person_id: str) -> Dict[str, Any]:
        """Get a single person by id."""
        data = await self._request("GET", f"persons/{person_id}")
        if not isinstance(data, dict):
            raise StammApiError(f"GET persons/{person_id} did not return an object", body=data)
        return data

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
        self._closed = True

    async def __aenter__(self) -> "PersonsApi":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
