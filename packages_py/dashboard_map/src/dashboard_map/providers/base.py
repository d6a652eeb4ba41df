"""
Capability interfaces of the dashboard.

Each interface has one or more implementations; the composition root
registers exactly one of them per interface. Implementations expose an
async ``create(services)`` class method that builds an instance from the
service registry.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from ..models import (
    CircleInformation,
    CircleProperties,
    CompanyInformation,
    EmployeeAddress,
    EmployeeCoordinates,
)

if TYPE_CHECKING:
    from ..registry import ServiceRegistry


class CompanyInformationProvider(ABC):
    """Provides the company shown on the map."""

    @classmethod
    @abstractmethod
    async def create(cls, services: "ServiceRegistry") -> "CompanyInformationProvider":
        ...

    @abstractmethod
    async def get_company_information(self) -> Optional[CompanyInformation]:
        ...


class CirclesPropertyProvider(ABC):
    """Provides display properties of circles."""

    @classmethod
    @abstractmethod
    async def create(cls, services: "ServiceRegistry") -> "CirclesPropertyProvider":
        ...

    @abstractmethod
    async def get_circle_properties(self) -> List[CircleProperties]:
        ...


class CirclesInformationProvider(ABC):
    """Provides circles with their members."""

    @classmethod
    @abstractmethod
    async def create(cls, services: "ServiceRegistry") -> "CirclesInformationProvider":
        ...

    @abstractmethod
    async def get_circles(self) -> List[CircleInformation]:
        ...


class EmployeeAddressesProvider(ABC):
    """Provides employee addresses."""

    @classmethod
    @abstractmethod
    async def create(cls, services: "ServiceRegistry") -> "EmployeeAddressesProvider":
        ...

    @abstractmethod
    async def get_employee_addresses(self) -> List[EmployeeAddress]:
        ...


class EmployeeCoordinatesProvider(ABC):
    """Provides employee map positions."""

    @classmethod
    @abstractmethod
    async def create(cls, services: "ServiceRegistry") -> "EmployeeCoordinatesProvider":
        ...

    @abstractmethod
    async def get_employee_coordinates(self) -> List[EmployeeCoordinates]:
        ...
