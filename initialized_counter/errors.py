"""Error taxonomy for initialized-counter."""


class InitializedCounterError(Exception):
    """Base exception for initialized-counter."""


class ConfigurationError(InitializedCounterError):
    """Raised when a reporter or setting is invalid."""
