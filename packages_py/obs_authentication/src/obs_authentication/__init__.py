"""
Access tokens for OBS backend services.
"""
from .exceptions import AuthenticationError
from .service import AuthenticationService

__all__ = [
    "AuthenticationError",
    "AuthenticationService",
]
