from typing import Any, Dict, Optional


class IdxError(Exception):
    """Base exception for all idx errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(IdxError):
    """Raised when a provider or configuration value is invalid."""
    pass


class UnavailableSourceError(IdxError):
    """Raised when no adequate time source exists on this host."""

    def __init__(self, message: str, source: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.source = source


class TimestampRangeError(IdxError):
    """Raised when a timestamp does not fit in the time field."""

    def __init__(self, message: str, timestamp_ms: Optional[int] = None, length: Optional[int] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)
        self.timestamp_ms = timestamp_ms
        self.length = length


def require_callable(fn: Any, name: str) -> None:
    """Raise ConfigurationError unless fn can be called."""
    if not callable(fn):
        raise ConfigurationError(
            f"expected {name} to be a function, got {type(fn).__name__}",
            context={"argument": name, "type": type(fn).__name__},
        )
