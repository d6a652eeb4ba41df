"""
Exceptions for stamm_client.
"""
from typing import Any, Optional


class StammApiError(Exception):
    """Raised when a call to the OBS-Stamm API fails.

    Attributes:
        status_code: HTTP status of the response, None for transport errors
        body: Decoded response body, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
