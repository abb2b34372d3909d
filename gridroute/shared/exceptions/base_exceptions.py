"""Base exceptions for gridroute."""
from typing import List, Optional


class GridRouteException(Exception):
    """Base exception class for gridroute."""
    
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        """Initialize exception.
        
        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            details: Optional additional error details
        """
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
    
    def __str__(self) -> str:
        """Return string representation of exception."""
        base_msg = super().__str__()
        if self.error_code:
            return f"[{self.error_code}] {base_msg}"
        return base_msg


class ConfigurationError(GridRouteException):
    """Raised when a grid cannot be searched, e.g. no start or goal cell."""
    
    def __init__(self, message: str, missing: Optional[List[str]] = None, **kwargs):
        """Initialize configuration error.
        
        Args:
            message: Error message
            missing: Endpoints absent from the grid ("start", "goal")
        """
        kwargs.setdefault('error_code', 'MISSING_ENDPOINT' if missing else None)
        super().__init__(message, **kwargs)
        self.missing = list(missing or [])


class ValidationError(GridRouteException):
    """Exception raised for validation errors."""
    
    def __init__(self, message: str, field: str = None, value=None, **kwargs):
        """Initialize validation error.
        
        Args:
            message: Error message
            field: Field that failed validation
            value: Invalid value
        """
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
