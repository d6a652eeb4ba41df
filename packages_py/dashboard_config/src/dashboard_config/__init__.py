from .types import (
    CoordinateSource,
    EmployeeAddressesSource,
    ServicesConfiguration,
    AuthenticationConfiguration,
    NominatimConfiguration,
    CompanyConfiguration,
    CircleConfiguration,
    EmployeeAddressConfiguration,
    EmployeeCoordinateConfiguration,
    DashboardConfig,
)
from .exceptions import ConfigurationError, ConfigNotInitializedError
from .config_store import config, ConfigStore, LoadResult
from .settings import DashboardSettings, get_settings
from .url_resolver import resolve_service_url, interpolate
from .sdk import load_yaml_config
