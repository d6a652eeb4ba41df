"""
Circle providers.

Circle display properties come from configuration; circle membership is
derived from the circles listed on each employee address.
"""
import logging
from typing import Dict, List

from dashboard_config.types import DashboardConfig

from ..models import CircleInformation, CircleProperties
from .base import (
    CirclesInformationProvider,
    CirclesPropertyProvider,
    EmployeeAddressesProvider,
)

logger = logging.getLogger(__name__)

DEFAULT_CIRCLE_COLOR = "#808080"


class ConfigurationCirclesPropertyProvider(CirclesPropertyProvider):
    """Reads circle properties from the ``Circles`` configuration section."""

    def __init__(self, config: DashboardConfig) -> None:
        self._config = config

    @classmethod
    async def create(cls, services) -> "ConfigurationCirclesPropertyProvider":
        return cls(await services.resolve(DashboardConfig))

    async def get_circle_properties(self) -> List[CircleProperties]:
        return [
            CircleProperties(
                name=circle.name,
                display_name=circle.display_name or circle.name,
                color=circle.color,
            )
            for circle in self._config.circles
        ]


class EmployeeCirclesInformationProvider(CirclesInformationProvider):
    """Groups employees by circle.

    Circles without configured properties get the circle name as display
    name and a neutral colour. Configured circles without members are kept.
    """

    def __init__(
        self,
        addresses: EmployeeAddressesProvider,
        properties: CirclesPropertyProvider,
    ) -> None:
        self._addresses = addresses
        self._properties = properties

    @classmethod
    async def create(cls, services) -> "EmployeeCirclesInformationProvider":
        return cls(
            await services.resolve(EmployeeAddressesProvider),
            await services.resolve(CirclesPropertyProvider),
        )

    async def get_circles(self) -> List[CircleInformation]:
        circles: Dict[str, CircleInformation] = {
            props.name: CircleInformation(properties=props)
            for props in await self._properties.get_circle_properties()
        }

        for address in await self._addresses.get_employee_addresses():
            for circle_name in dict.fromkeys(address.circles):
                if circle_name not in circles:
                    logger.debug(
                        f"EmployeeCirclesInformationProvider: Circle '{circle_name}' has no "
                        f"configured properties, using defaults"
                    )
                    circles[circle_name] = CircleInformation(
                        properties=CircleProperties(
                            name=circle_name,
                            display_name=circle_name,
                            color=DEFAULT_CIRCLE_COLOR,
                        )
                    )
                circles[circle_name].member_ids.append(address.employee_id)

        return list(circles.values())
