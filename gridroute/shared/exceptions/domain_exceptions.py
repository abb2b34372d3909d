"""Domain-specific exceptions."""
from .base_exceptions import GridRouteException


class GridError(GridRouteException):
    """Exception raised for illegal grid mutations."""
    
    def __init__(self, message: str, position=None, **kwargs):
        """Initialize grid error.
        
        Args:
            message: Error message
            position: Grid position the operation was attempted on
        """
        super().__init__(message, **kwargs)
        self.position = position
