from .base import (
    CompanyInformationProvider,
    CirclesPropertyProvider,
    CirclesInformationProvider,
    EmployeeAddressesProvider,
    EmployeeCoordinatesProvider,
)
from .company import ConfigurationCompanyInformationProvider
from .circles import ConfigurationCirclesPropertyProvider
from .circles import EmployeeCirclesInformationProvider
from .addresses import (
    ConfigurationEmployeeAddressesProvider,
    EmployeeObsStammAddressesProvider,
    person_to_address,
)
from .coordinates import (
    ConfigurationEmployeeCoordinatesProvider,
    NominatimEmployeeCoordinatesProvider,
    GeocodingError,
)
