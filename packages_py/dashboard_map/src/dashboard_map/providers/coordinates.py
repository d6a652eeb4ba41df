"""
Employee coordinate providers.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from dashboard_config.types import DashboardConfig, NominatimConfiguration

from ..models import Coordinates, EmployeeAddress, EmployeeCoordinates
from .base import EmployeeAddressesProvider, EmployeeCoordinatesProvider

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Raised when the geocoding service cannot be queried."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationEmployeeCoordinatesProvider(EmployeeCoordinatesProvider):
    """Reads coordinates from the ``EmployeeCoordinates`` configuration section."""

    def __init__(self, config: DashboardConfig) -> None:
        self._config = config

    @classmethod
    async def create(cls, services) -> "ConfigurationEmployeeCoordinatesProvider":
        return cls(await services.resolve(DashboardConfig))

    async def get_employee_coordinates(self) -> List[EmployeeCoordinates]:
        return [
            EmployeeCoordinates(
                employee_id=entry.employee_id,
                coordinates=Coordinates(entry.latitude, entry.longitude),
            )
            for entry in self._config.employee_coordinates
        ]


class NominatimEmployeeCoordinatesProvider(EmployeeCoordinatesProvider):
    """
    Geocodes employee addresses with Nominatim.

    Addresses are looked up one after another, ``request_interval_seconds``
    apart. Addresses without a hit are left out.

    Args:
        config: Nominatim section of the dashboard configuration
        addresses: Source of the addresses to geocode
        http_client: Shared httpx.AsyncClient
    """

    def __init__(
        self,
        config: NominatimConfiguration,
        addresses: EmployeeAddressesProvider,
        http_client: httpx.AsyncClient,
    ) -> None:
        self._config = config
        self._addresses = addresses
        self._http_client = http_client

    @classmethod
    async def create(cls, services) -> "NominatimEmployeeCoordinatesProvider":
        config = await services.resolve(DashboardConfig)
        return cls(
            config.nominatim,
            await services.resolve(EmployeeAddressesProvider),
            await services.resolve(httpx.AsyncClient),
        )

    async def geocode(self, query: str) -> Optional[Coordinates]:
        """
        Look up a single free-form address.

        Returns:
            Coordinates of the best hit, or None without a hit

        Raises:
            GeocodingError: Transport failure, non-2xx or unusable response
        """
        params: Dict[str, Any] = {"q": query, "format": "json", "limit": 1}
        if self._config.country_codes:
            params["countrycodes"] = self._config.country_codes

        url = f"{self._config.base_url.rstrip('/')}/search"
        try:
            response = await self._http_client.get(
                url,
                params=params,
                headers={"User-Agent": self._config.user_agent, "Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise GeocodingError(f"Nominatim request failed: {e}") from e

        if not response.is_success:
            raise GeocodingError(
                f"Nominatim answered {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            results = response.json()
            if not isinstance(results, list):
                raise TypeError(f"expected a list, got {type(results).__name__}")
            if not results:
                return None
            hit = results[0]
            return Coordinates(float(hit["lat"]), float(hit["lon"]))
        except (ValueError, KeyError, TypeError, IndexError) as e:
            logger.error(f"NominatimEmployeeCoordinatesProvider.geocode: Unusable response for '{query}': {e}")
            raise GeocodingError(
                f"Nominatim returned an unusable response: {e}",
                status_code=response.status_code,
            ) from e

    async def get_employee_coordinates(self) -> List[EmployeeCoordinates]:
        addresses: List[EmployeeAddress] = await self._addresses.get_employee_addresses()
        coordinates = []

        for index, address in enumerate(addresses):
            if index and self._config.request_interval_seconds:
                await asyncio.sleep(self._config.request_interval_seconds)

            query = address.as_query()
            if not query:
                logger.warning(
                    f"NominatimEmployeeCoordinatesProvider: Employee {address.employee_id} has an empty address"
                )
                continue

            position = await self.geocode(query)
            if position is None:
                logger.warning(
                    f"NominatimEmployeeCoordinatesProvider: No result for employee "
                    f"{address.employee_id} ({query})"
                )
                continue
            coordinates.append(EmployeeCoordinates(address.employee_id, position))

        logger.info(
            f"NominatimEmployeeCoordinatesProvider: Geocoded {len(coordinates)} of {len(addresses)} addresses"
        )
        return coordinates
