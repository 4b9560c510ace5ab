"""Custom exception classes for cliwarn.

Normal dispatch never raises: unknown, suppressed and non-matching topics
all come back as ``False``. These exceptions cover invalid input only.
"""

from typing import Optional, Dict, Any


class CliWarnError(Exception):
    """Base exception for all cliwarn errors."""

    error_code: str = "ERR000"  # Override in subclasses

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        """
        Initialize cliwarn exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context
            error_code: Optional error code override
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if error_code:
            self.error_code = error_code

    def __str__(self) -> str:
        """Return string representation with error code and details."""
        parts = [f"[{self.error_code}] {self.message}"]
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"({detail_str})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InvalidMessageError(CliWarnError, TypeError):
    """Raised when a warning message cannot be formatted.

    Examples:
        - Spec registered without a ``message``
        - ``message`` is neither a string nor a list/tuple of strings
    """

    error_code = "MSG001"

    def __init__(self, message: str, name: Optional[str] = None, message_type: Optional[str] = None):
        """
        Initialize invalid message error.

        Args:
            message: Description of the problem
            name: Topic whose message failed to format
            message_type: Type name of the offending message value
        """
        details = {}
        if name:
            details["name"] = name
        if message_type:
            details["message_type"] = message_type
        super().__init__(message, details)
        self.name = name
        self.message_type = message_type


class SpecLoadError(CliWarnError):
    """Raised when a warnings file cannot be loaded.

    Examples:
        - Unsupported file extension
        - JSON/YAML syntax errors
        - Python module without a ``WARNINGS`` attribute
        - Invalid ``match`` regular expression
    """

    error_code = "LOD001"

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[Exception] = None):
        """
        Initialize spec load error.

        Args:
            message: Description of the failure
            path: Path of the warnings file
            cause: Underlying exception, if any
        """
        details = {}
        if path:
            details["path"] = path
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__
        super().__init__(message, details)
        self.path = path
        self.cause = cause


class ColorError(CliWarnError, ValueError):
    """Raised for color values that cannot be turned into ANSI codes."""

    error_code = "CLR001"

    def __init__(self, message: str, color: Optional[str] = None):
        details = {"color": color} if color is not None else {}
        super().__init__(message, details)
        self.color = color


class ConfigurationError(CliWarnError, ValueError):
    """Raised when environment configuration has an invalid value."""

    error_code = "CFG001"

    def __init__(self, message: str, key: Optional[str] = None, value: Optional[str] = None):
        details = {}
        if key:
            details["key"] = key
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.key = key
        self.value = value


class RegistryReleasedError(CliWarnError, RuntimeError):
    """Raised when a released registry is asked to take new state."""

    error_code = "REG001"

    def __init__(self, message: str, namespace: Optional[str] = None):
        details = {"namespace": namespace} if namespace is not None else {}
        super().__init__(message, details)
        self.namespace = namespace


__all__ = [
    "CliWarnError",
    "InvalidMessageError",
    "SpecLoadError",
    "ColorError",
    "ConfigurationError",
    "RegistryReleasedError",
]
