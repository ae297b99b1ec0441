# streamctl/errors.py

from typing import List, Optional


class StreamClientError(Exception):
    """Base exception for stream client operations"""
    pass


class ValidationError(StreamClientError, ValueError):
    """Missing or malformed input, detected locally or rejected by the server"""
    pass


class ConfigurationError(ValidationError):
    """Configuration related errors"""
    pass


class TransportError(StreamClientError):
    """Network failure or service unavailability"""
    pass


class StreamApiError(StreamClientError):
    """Non-success response from the admin server"""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 messages: Optional[List[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.messages = messages or []


class ConflictError(StreamApiError):
    """A resource with the same name already exists"""
    pass


class NotFoundError(StreamApiError):
    """Resource not found on the admin server"""
    pass


def require_text(value: Optional[str], message: str,
                 error_class: type = ValidationError) -> str:
    """Return value if it holds non-whitespace text, raise error_class otherwise"""
    if value is None or not isinstance(value, str) or not value.strip():
        raise error_class(message)
    return value


def require_port(port: int, field_name: str = 'port') -> int:
    """Validate a TCP/UDP port number"""
    try:
        port = int(port)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if not 1 <= port <= 65535:
        raise ValidationError(f"{field_name} must be between 1 and 65535, got {port}")
    return port
