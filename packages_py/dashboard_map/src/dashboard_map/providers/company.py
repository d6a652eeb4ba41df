import logging
from typing import Optional

from dashboard_config.types import DashboardConfig

from ..models import CompanyInformation, Coordinates
from .base import CompanyInformationProvider

logger = logging.getLogger(__name__)


class ConfigurationCompanyInformationProvider(CompanyInformationProvider):
    """Reads the company from the ``Company`` configuration section."""

    def __init__(self, config: DashboardConfig) -> None:
        self._config = config

    @classmethod
    async def create(cls, services) -> "ConfigurationCompanyInformationProvider":
        return cls(await services.resolve(DashboardConfig))

    async def get_company_information(self) -> Optional[CompanyInformation]:
        company = self._config.company
        if company is None:
            logger.debug("ConfigurationCompanyInformationProvider: No Company section configured")
            return None

        locality = " ".join(part for part in (company.postal_code, company.city) if part)
        address = ", ".join(part for part in (company.street, locality, company.country) if part)

        coordinates = None
        if company.latitude is not None and company.longitude is not None:
            coordinates = Coordinates(company.latitude, company.longitude)

        return CompanyInformation(name=company.name, address=address, coordinates=coordinates)
