"""Domain-specific exceptions for neo-fetch.

Configuration and validation problems raised while building controllers
or changing page numbers and sizes.
"""

from .base import NeoFetchError


# Configuration Errors
class ConfigurationError(NeoFetchError):
    """Raised when there's a configuration issue."""
    pass


class EventLoopRequiredError(ConfigurationError):
    """Raised when work must be scheduled but no event loop is running."""
    pass


# Validation Errors
class ValidationError(NeoFetchError, ValueError):
    """Raised when input validation fails."""
    pass


class InvalidPageNumberError(ValidationError):
    """Raised when a page number is below 1."""
    pass


class InvalidPageSizeError(ValidationError):
    """Raised when a page size is not positive."""
    pass
