"""
Composition root of the dashboard map.

configure_services() registers one implementation per capability:

    CompanyInformationProvider   -> ConfigurationCompanyInformationProvider
    CirclesPropertyProvider      -> ConfigurationCirclesPropertyProvider
    CirclesInformationProvider   -> EmployeeCirclesInformationProvider
    EmployeeAddressesProvider    -> chosen by EmployeeAddressesSource
    EmployeeCoordinatesProvider  -> chosen by CoordinateSource
    PersonsApi                   -> authenticated OBS-Stamm client
    AuthenticationService        -> token client for the Authentication section
    httpx.AsyncClient            -> shared, closed with the registry
"""
import logging
from typing import Optional

import httpx

from dashboard_config.types import DashboardConfig
from obs_authentication import AuthenticationService
from stamm_client import PersonsApi

from .persons_client import persons_api_factory
from .providers.base import (
    CirclesInformationProvider,
    CirclesPropertyProvider,
    CompanyInformationProvider,
)
from .providers.circles import (
    ConfigurationCirclesPropertyProvider,
    EmployeeCirclesInformationProvider,
)
from .providers.company import ConfigurationCompanyInformationProvider
from .registry import ServiceRegistry
from .selection import register_providers

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the dashboard process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


async def _authentication_factory(services: ServiceRegistry) -> AuthenticationService:
    config = await services.resolve(DashboardConfig)
    return AuthenticationService(config.authentication, await services.resolve(httpx.AsyncClient))


def configure_services(
    config: DashboardConfig,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ServiceRegistry:
    """
    Build the service registry for a loaded configuration.

    Args:
        config: Validated dashboard configuration
        http_client: Shared client to use instead of one owned by the
            registry (stays owned by the caller)

    Returns:
        The populated ServiceRegistry
    """
    services = ServiceRegistry()
    services.add_singleton(DashboardConfig, instance=config)

    if http_client is not None:
        services.add_singleton(httpx.AsyncClient, instance=http_client)
    else:
        services.add_singleton(httpx.AsyncClient, factory=lambda _: httpx.AsyncClient())

    services.add_transient(AuthenticationService, _authentication_factory)
    services.add_transient(PersonsApi, persons_api_factory)

    services.add_transient(CompanyInformationProvider, ConfigurationCompanyInformationProvider.create)
    services.add_transient(CirclesPropertyProvider, ConfigurationCirclesPropertyProvider.create)
    services.add_transient(CirclesInformationProvider, EmployeeCirclesInformationProvider.create)

    register_providers(services, config)

    logger.info("configure_services: Dashboard services registered")
    return services
