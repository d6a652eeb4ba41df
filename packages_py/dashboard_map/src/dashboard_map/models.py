"""
Data shown on the dashboard map.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Coordinates:
    """WGS84 position."""

    latitude: float
    longitude: float


@dataclass
class EmployeeAddress:
    """Postal address of an employee."""

    employee_id: str
    name: str = ""
    street: str = ""
    postal_code: str = ""
    city: str = ""
    country: str = ""
    circles: List[str] = field(default_factory=list)

    def as_query(self) -> str:
        """Single-line form used for geocoding, e.g. 'Main St 1, 12345 Town, DE'."""
        locality = " ".join(part for part in (self.postal_code, self.city) if part)
        return ", ".join(part for part in (self.street, locality, self.country) if part)


@dataclass
class EmployeeCoordinates:
    """Map position of an employee."""

    employee_id: str
    coordinates: Coordinates


@dataclass
class CompanyInformation:
    """The company marker on the map."""

    name: str
    address: str = ""
    coordinates: Optional[Coordinates] = None


@dataclass
class CircleProperties:
    """How a circle is rendered."""

    name: str
    display_name: str
    color: str


@dataclass
class CircleInformation:
    """A circle together with its members."""

    properties: CircleProperties
    member_ids: List[str] = field(default_factory=list)
