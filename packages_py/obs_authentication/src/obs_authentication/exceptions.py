"""
Exceptions for obs_authentication.
"""
from typing import Optional


class AuthenticationError(Exception):
    """Raised when an access token cannot be obtained.

    Attributes:
        cause: The underlying exception, if any
        status_code: HTTP status returned by the token endpoint, if any
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code
