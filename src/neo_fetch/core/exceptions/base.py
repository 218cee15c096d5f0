"""Base exceptions for neo-fetch.

This module defines the base exception hierarchy for the neo-fetch library.
All exceptions inherit from NeoFetchError and carry an error code and
structured details for logging and error observers.
"""

from typing import Any, Dict, Optional


class NeoFetchError(Exception):
    """Base exception for all neo-fetch errors.
    
    All exceptions in the neo-fetch library inherit from this base class
    and include structured error information for better debugging.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_report(exception: NeoFetchError) -> Dict[str, Any]:
    """Create standardized error report from exception.
    
    Args:
        exception: The neo-fetch exception
        
    Returns:
        Error report dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
