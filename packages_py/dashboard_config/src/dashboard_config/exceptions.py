"""Exceptions raised while loading or interpreting dashboard configuration."""


class ConfigurationError(Exception):
    """Raised when configuration is missing, malformed or fails validation."""
    pass


class ConfigNotInitializedError(Exception):
    """Raised when trying to access config store before initialization."""
    pass
