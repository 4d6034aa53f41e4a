"""Configuration error type."""


class ConfigurationError(ValueError):
    """Raised when configuration cannot be loaded or holds an invalid value.

    Always fatal at startup, independent of the configured error level.
    """
