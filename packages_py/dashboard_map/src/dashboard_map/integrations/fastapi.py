"""
FastAPI integration for dashboard_map.

Provides lifespan management and dependency injection for the service
registry.
"""
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Awaitable, Callable, Optional, Type, TypeVar
import logging

from fastapi import Request

from dashboard_config import config as config_store, get_settings, load_yaml_config
from dashboard_config.types import DashboardConfig

from ..startup import configure_logging, configure_services

logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_lifespan(
    config: Optional[DashboardConfig] = None,
) -> Callable[..., AsyncGenerator[None, None]]:
    """
    Factory to create FastAPI lifespan context manager.

    Args:
        config: Dashboard configuration to use. When omitted the YAML
                configuration is loaded at startup with load_yaml_config().

    Returns:
        Lifespan context manager for FastAPI app.

    Example:
        from fastapi import Depends, FastAPI
        from dashboard_map.integrations.fastapi import create_lifespan, get_service

        app = FastAPI(lifespan=create_lifespan())

        @app.get("/company")
        async def company(
            provider: CompanyInformationProvider = Depends(get_service(CompanyInformationProvider)),
        ):
            return await provider.get_company_information()
    """

    @asynccontextmanager
    async def lifespan(app: Any) -> AsyncGenerator[None, None]:
        dashboard_config = config
        if dashboard_config is None:
            settings = get_settings()
            configure_logging(settings.log_level)
            result = load_yaml_config()
            logger.info(f"Dashboard configuration loaded: {result.files_loaded}")
            dashboard_config = config_store.get_config()

        # Store registry on app.state (application-scoped)
        services = configure_services(dashboard_config)
        app.state.services = services

        try:
            yield  # App is running
        finally:
            await services.aclose()
            logger.info("Dashboard services closed")

    return lifespan


def get_service(interface: Type[T]) -> Callable[..., Awaitable[T]]:
    """
    FastAPI dependency resolving ``interface`` from the registry.

    Args:
        interface: Registered interface type.

    Returns:
        Dependency function that returns an instance of ``interface``.
    """

    async def _get_service(request: Request) -> T:
        return await request.app.state.services.resolve(interface)

    return _get_service
