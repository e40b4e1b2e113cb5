"""
Service-layer exceptions for consistent error handling across InternTrack.

These exceptions provide a consistent way to handle service configuration
and availability issues throughout the application.
"""


class ServiceError(Exception):
    """Base exception for all service-related errors."""
    pass


class ServiceNotConfigured(ServiceError):
    """
    Raised when a service needs configuration that is missing.
    
    Example:
        If the reports API is called but INTERNTRACK_API_SECRET is not set.
    """
    pass
