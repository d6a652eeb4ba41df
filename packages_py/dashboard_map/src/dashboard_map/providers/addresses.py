"""
Employee address providers.
"""
import logging
from typing import Any, Dict, List, Optional

from dashboard_config.types import DashboardConfig
from stamm_client import PersonsApi

from ..models import EmployeeAddress
from .base import EmployeeAddressesProvider

logger = logging.getLogger(__name__)


class ConfigurationEmployeeAddressesProvider(EmployeeAddressesProvider):
    """Reads addresses from the ``EmployeeAddresses`` configuration section."""

    def __init__(self, config: DashboardConfig) -> None:
        self._config = config

    @classmethod
    async def create(cls, services) -> "ConfigurationEmployeeAddressesProvider":
        return cls(await services.resolve(DashboardConfig))

    async def get_employee_addresses(self) -> List[EmployeeAddress]:
        return [
            EmployeeAddress(
                employee_id=entry.employee_id,
                name=entry.name,
                street=entry.street,
                postal_code=entry.postal_code,
                city=entry.city,
                country=entry.country,
                circles=list(entry.circles),
            )
            for entry in self._config.employee_addresses
        ]


def person_to_address(person: Dict[str, Any]) -> Optional[EmployeeAddress]:
    """
    Map an OBS-Stamm person record to an EmployeeAddress.

    Expected shape::

        {"id": "17", "firstName": "Ada", "lastName": "Lovelace",
         "address": {"street": "...", "postalCode": "...", "city": "...", "country": "..."},
         "circles": ["Engineering"]}

    Returns:
        The address, or None when the person has no id or no address
    """
    person_id = person.get("id")
    address = person.get("address")
    if person_id is None or not isinstance(address, dict):
        return None

    name = " ".join(part for part in (person.get("firstName"), person.get("lastName")) if part)
    return EmployeeAddress(
        employee_id=str(person_id),
        name=name,
        street=address.get("street") or "",
        postal_code=address.get("postalCode") or "",
        city=address.get("city") or "",
        country=address.get("country") or "",
        circles=list(person.get("circles") or []),
    )


class EmployeeObsStammAddressesProvider(EmployeeAddressesProvider):
    """Reads addresses of active persons from the OBS-Stamm service."""

    def __init__(self, persons_api: PersonsApi) -> None:
        self._persons_api = persons_api

    @classmethod
    async def create(cls, services) -> "EmployeeObsStammAddressesProvider":
        return cls(await services.resolve(PersonsApi))

    async def get_employee_addresses(self) -> List[EmployeeAddress]:
        persons = await self._persons_api.get_persons(active_only=True)
        addresses = []
        for person in persons:
            address = person_to_address(person)
            if address is None:
                logger.debug(
                    f"EmployeeObsStammAddressesProvider: Skipping person "
                    f"id={person.get('id')!r} without address"
                )
                continue
            addresses.append(address)

        logger.info(
            f"EmployeeObsStammAddressesProvider: {len(addresses)} of {len(persons)} persons have an address"
        )
        return addresses
