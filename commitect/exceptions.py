"""Configuration-related exception classes."""


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""

    pass
