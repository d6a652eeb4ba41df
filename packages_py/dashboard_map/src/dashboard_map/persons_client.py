"""
Factory for the authenticated OBS-Stamm persons client.

Steps:
1. Resolve the service URL (Services.StammServiceUrl, else ServiceTemplateUrl
   interpolated with "obsstamm")
2. Construct PersonsApi with its default configuration
3. Await an access token from the AuthenticationService
4. Merge a token-only configuration over the client's configuration
5. Return the configured client

URL resolution and merging are pure; only step 3 suspends. Failures in any
step propagate and no client is returned.
"""
import asyncio
import logging
from typing import Optional

import httpx

from dashboard_config.types import DashboardConfig, ServicesConfiguration
from dashboard_config.url_resolver import resolve_service_url
from obs_authentication import AuthenticationService
from stamm_client import Configuration, PersonsApi, merge_configurations

logger = logging.getLogger(__name__)

OBS_STAMM_SERVICE_ID = "obsstamm"


async def build_persons_client(
    services_config: ServicesConfiguration,
    auth_service: AuthenticationService,
    http_client: Optional[httpx.AsyncClient] = None,
    cancellation: Optional[asyncio.Event] = None,
) -> PersonsApi:
    """
    Build a PersonsApi bound to the OBS-Stamm URL and carrying an access token.

    Args:
        services_config: Services section of the dashboard configuration
        auth_service: Source of the access token
        http_client: Shared httpx.AsyncClient for the persons requests
        cancellation: Optional event that cancels the token request

    Returns:
        The configured PersonsApi

    Raises:
        ConfigurationError: If no usable URL is configured
        AuthenticationError: If the token cannot be obtained
        asyncio.CancelledError: If the token request is cancelled
    """
    url = resolve_service_url(
        services_config.stamm_service_url,
        services_config.service_template_url,
        OBS_STAMM_SERVICE_ID,
    )
    persons_api = PersonsApi(url, http_client=http_client)

    access_token = await auth_service.get_access_token(cancellation)

    persons_api.configuration = merge_configurations(
        Configuration(access_token=access_token),
        persons_api.configuration,
    )
    logger.debug(f"build_persons_client: PersonsApi ready for {url}")
    return persons_api


async def persons_api_factory(services) -> PersonsApi:
    """Registry factory: builds a PersonsApi from registered services."""
    config = await services.resolve(DashboardConfig)
    return await build_persons_client(
        config.services,
        await services.resolve(AuthenticationService),
        http_client=await services.resolve(httpx.AsyncClient),
    )
