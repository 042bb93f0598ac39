"""Exception types raised by the store engine and its helpers."""


class ReducksError(Exception):
    """Base class for every error raised by reducks itself."""


class ConfigError(ReducksError, TypeError):
    """Raised when a reducer, enhancer, or action-creator map is not usable."""


class ValidationError(ReducksError, TypeError):
    """Raised for malformed actions, listeners, or observers."""


class ReentrancyError(ReducksError, RuntimeError):
    """Raised when the store is touched while a reducer is executing."""


class ReducerError(ReducksError, ValueError):
    """Raised when a combined reducer returns None for its slice."""
