"""
Employee dashboard map: which employee lives where, and in which circle.
"""
from .models import (
    Coordinates,
    EmployeeAddress,
    EmployeeCoordinates,
    CompanyInformation,
    CircleProperties,
    CircleInformation,
)
from .providers import (
    CompanyInformationProvider,
    CirclesPropertyProvider,
    CirclesInformationProvider,
    EmployeeAddressesProvider,
    EmployeeCoordinatesProvider,
    ConfigurationCompanyInformationProvider,
    ConfigurationCirclesPropertyProvider,
    EmployeeCirclesInformationProvider,
    ConfigurationEmployeeAddressesProvider,
    EmployeeObsStammAddressesProvider,
    ConfigurationEmployeeCoordinatesProvider,
    NominatimEmployeeCoordinatesProvider,
    GeocodingError,
)
from .registry import ServiceRegistry, Lifetime, RegistrationError, ServiceNotRegisteredError
from .persons_client import OBS_STAMM_SERVICE_ID, build_persons_client
from .selection import select_coordinate_provider, select_address_provider, register_providers
from .startup import configure_logging, configure_services
