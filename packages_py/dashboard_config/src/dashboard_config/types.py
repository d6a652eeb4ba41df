"""Type definitions for dashboard configuration.

Provides Pydantic models for configuration validation and type safety.
Field aliases keep the key names used in the YAML files (``StammServiceUrl``,
``CoordinateSource``, ...); snake_case names are accepted as well.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CaseInsensitiveEnum(str, Enum):
    """String enum parsed the way the configuration binder does it.

    Accepts the member value in any letter case or the member's ordinal
    as a string ("0", "1").
    """

    @classmethod
    def parse(cls, value: Any) -> Optional["_CaseInsensitiveEnum"]:
        """
        Parse a raw configuration value.

        Returns:
            The matching member, or None when the value is absent/empty

        Raises:
            ValueError: If the value names no member
        """
        if value is None or isinstance(value, cls):
            return value

        text = str(value).strip()
        if not text:
            return None

        members = list(cls)
        if text.isdigit() and int(text) < len(members):
            return members[int(text)]

        for member in members:
            if member.value.lower() == text.lower():
                return member

        allowed = ", ".join(member.value for member in members)
        raise ValueError(f"'{value}' is not a valid {cls.__name__} (expected one of: {allowed})")


class CoordinateSource(_CaseInsensitiveEnum):
    """Where employee coordinates come from."""
    CONFIGURATION = "Configuration"
    NOMINATIM = "Nominatim"


class EmployeeAddressesSource(_CaseInsensitiveEnum):
    """Where employee addresses come from."""
    CONFIGURATION = "Configuration"
    OBS_STAMM = "ObsStamm"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ServicesConfiguration(_ConfigModel):
    """Endpoints of the OBS backend services."""
    stamm_service_url: Optional[str] = Field(default=None, alias="StammServiceUrl")
    service_template_url: Optional[str] = Field(default=None, alias="ServiceTemplateUrl")


class AuthenticationConfiguration(_ConfigModel):
    """OAuth2 client credentials used to obtain access tokens.

    The secret is either given literally (``ClientSecret``) or looked up
    from the environment variable named by ``EnvClientSecret``.
    """
    token_url: Optional[str] = Field(default=None, alias="TokenUrl")
    client_id: Optional[str] = Field(default=None, alias="ClientId")
    client_secret: Optional[str] = Field(default=None, alias="ClientSecret", repr=False)
    env_client_secret: Optional[str] = Field(default=None, alias="EnvClientSecret")
    scope: Optional[str] = Field(default=None, alias="Scope")
    audience: Optional[str] = Field(default=None, alias="Audience")


class NominatimConfiguration(_ConfigModel):
    """Nominatim geocoding settings."""
    base_url: str = Field(default="https://nominatim.openstreetmap.org", alias="BaseUrl")
    user_agent: str = Field(default="obs-dashboard-map", alias="UserAgent")
    country_codes: Optional[str] = Field(default=None, alias="CountryCodes")
    # The public Nominatim usage policy allows one request per second
    request_interval_seconds: float = Field(default=1.0, ge=0, alias="RequestIntervalSeconds")


class CompanyConfiguration(_ConfigModel):
    """Company headquarters shown on the map."""
    name: str = Field(alias="Name")
    street: str = Field(default="", alias="Street")
    postal_code: str = Field(default="", alias="PostalCode")
    city: str = Field(default="", alias="City")
    country: str = Field(default="", alias="Country")
    latitude: Optional[float] = Field(default=None, alias="Latitude")
    longitude: Optional[float] = Field(default=None, alias="Longitude")


class CircleConfiguration(_ConfigModel):
    """Display properties of a circle."""
    name: str = Field(alias="Name")
    display_name: Optional[str] = Field(default=None, alias="DisplayName")
    color: str = Field(default="#808080", alias="Color")


class EmployeeAddressConfiguration(_ConfigModel):
    """Employee address maintained in configuration."""
    employee_id: str = Field(alias="EmployeeId")
    name: str = Field(default="", alias="Name")
    street: str = Field(default="", alias="Street")
    postal_code: str = Field(default="", alias="PostalCode")
    city: str = Field(default="", alias="City")
    country: str = Field(default="", alias="Country")
    circles: List[str] = Field(default_factory=list, alias="Circles")


class EmployeeCoordinateConfiguration(_ConfigModel):
    """Employee coordinates maintained in configuration."""
    employee_id: str = Field(alias="EmployeeId")
    latitude: float = Field(alias="Latitude")
    longitude: float = Field(alias="Longitude")


class DashboardConfig(_ConfigModel):
    """Root configuration model for dashboard.{APP_ENV}.yaml files."""
    services: ServicesConfiguration = Field(default_factory=ServicesConfiguration, alias="Services")
    authentication: AuthenticationConfiguration = Field(
        default_factory=AuthenticationConfiguration, alias="Authentication"
    )
    coordinate_source: Optional[CoordinateSource] = Field(default=None, alias="CoordinateSource")
    employee_addresses_source: Optional[EmployeeAddressesSource] = Field(
        default=None, alias="EmployeeAddressesSource"
    )
    nominatim: NominatimConfiguration = Field(default_factory=NominatimConfiguration, alias="Nominatim")
    company: Optional[CompanyConfiguration] = Field(default=None, alias="Company")
    circles: List[CircleConfiguration] = Field(default_factory=list, alias="Circles")
    employee_addresses: List[EmployeeAddressConfiguration] = Field(
        default_factory=list, alias="EmployeeAddresses"
    )
    employee_coordinates: List[EmployeeCoordinateConfiguration] = Field(
        default_factory=list, alias="EmployeeCoordinates"
    )

    @field_validator("coordinate_source", mode="before")
    @classmethod
    def _parse_coordinate_source(cls, value: Any) -> Optional[CoordinateSource]:
        return CoordinateSource.parse(value)

    @field_validator("employee_addresses_source", mode="before")
    @classmethod
    def _parse_employee_addresses_source(cls, value: Any) -> Optional[EmployeeAddressesSource]:
        return EmployeeAddressesSource.parse(value)
