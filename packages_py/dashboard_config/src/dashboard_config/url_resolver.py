import logging
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SERVICE_PLACEHOLDER = "{service}"


def interpolate(template: str, name: str, value: str) -> str:
    """Replace every ``{name}`` placeholder in template with value."""
    return template.replace("{" + name + "}", value)


def resolve_service_url(
    explicit_url: Optional[str],
    template: Optional[str],
    service_id: str,
) -> str:
    """
    Resolve the endpoint of a backend service.

    Precedence:
    1. explicit_url, returned unchanged when present and non-empty
    2. template with ``{service}`` replaced by service_id

    Args:
        explicit_url: Configured override (e.g. Services.StammServiceUrl)
        template: URL template (e.g. Services.ServiceTemplateUrl)
        service_id: Identifier substituted into the template

    Returns:
        The effective service URL

    Raises:
        ConfigurationError: If there is no override and the template is
            empty or lacks the placeholder
    """
    if explicit_url:
        logger.debug(f"resolve_service_url: Using explicit URL for '{service_id}': {explicit_url}")
        return explicit_url

    if not template:
        logger.error(f"resolve_service_url: No URL and no template configured for '{service_id}'")
        raise ConfigurationError(
            f"No URL configured for service '{service_id}' and ServiceTemplateUrl is empty"
        )

    if SERVICE_PLACEHOLDER not in template:
        logger.error(
            f"resolve_service_url: Template '{template}' has no {SERVICE_PLACEHOLDER} placeholder"
        )
        raise ConfigurationError(
            f"ServiceTemplateUrl '{template}' does not contain the {SERVICE_PLACEHOLDER} placeholder"
        )

    url = interpolate(template, "service", service_id)
    logger.debug(f"resolve_service_url: Interpolated template for '{service_id}': {url}")
    return url
