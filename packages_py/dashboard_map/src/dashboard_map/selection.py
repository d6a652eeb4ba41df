"""
Choice of capability implementations from configuration.

Each selector maps every member of its source enum to an implementation.
A value that is unset or names no member falls back to the
configuration-backed implementation.
"""
import logging
from typing import Any, Dict, Type

from dashboard_config.types import CoordinateSource, DashboardConfig, EmployeeAddressesSource

from .providers.addresses import (
    ConfigurationEmployeeAddressesProvider,
    EmployeeObsStammAddressesProvider,
)
from .providers.base import EmployeeAddressesProvider, EmployeeCoordinatesProvider
from .providers.coordinates import (
    ConfigurationEmployeeCoordinatesProvider,
    NominatimEmployeeCoordinatesProvider,
)

logger = logging.getLogger(__name__)

COORDINATE_PROVIDERS: Dict[CoordinateSource, Type[EmployeeCoordinatesProvider]] = {
    CoordinateSource.CONFIGURATION: ConfigurationEmployeeCoordinatesProvider,
    CoordinateSource.NOMINATIM: NominatimEmployeeCoordinatesProvider,
}

ADDRESS_PROVIDERS: Dict[EmployeeAddressesSource, Type[EmployeeAddressesProvider]] = {
    EmployeeAddressesSource.CONFIGURATION: ConfigurationEmployeeAddressesProvider,
    EmployeeAddressesSource.OBS_STAMM: EmployeeObsStammAddressesProvider,
}


def _select(table: Dict[Any, type], enum_cls: Any, source: Any, default: type) -> type:
    try:
        member = enum_cls.parse(source)
    except ValueError:
        logger.warning(
            f"Unrecognized {enum_cls.__name__} {source!r}, falling back to {default.__name__}"
        )
        return default

    if member is None:
        logger.debug(f"{enum_cls.__name__} not set, using {default.__name__}")
        return default
    return table[member]


def select_coordinate_provider(source: Any) -> Type[EmployeeCoordinatesProvider]:
    """Nominatim -> geocoding provider; anything else -> configuration provider."""
    return _select(
        COORDINATE_PROVIDERS,
        CoordinateSource,
        source,
        ConfigurationEmployeeCoordinatesProvider,
    )


def select_address_provider(source: Any) -> Type[EmployeeAddressesProvider]:
    """ObsStamm -> OBS-Stamm provider; anything else -> configuration provider."""
    return _select(
        ADDRESS_PROVIDERS,
        EmployeeAddressesSource,
        source,
        ConfigurationEmployeeAddressesProvider,
    )


def register_providers(services, config: DashboardConfig) -> None:
    """
    Register one coordinates and one addresses implementation.

    Args:
        services: ServiceRegistry to register with
        config: Loaded dashboard configuration
    """
    coordinates_cls = select_coordinate_provider(config.coordinate_source)
    services.add_transient(EmployeeCoordinatesProvider, coordinates_cls.create)
    logger.info(f"EmployeeCoordinatesProvider -> {coordinates_cls.__name__}")

    addresses_cls = select_address_provider(config.employee_addresses_source)
    services.add_transient(EmployeeAddressesProvider, addresses_cls.create)
    logger.info(f"EmployeeAddressesProvider -> {addresses_cls.__name__}")
