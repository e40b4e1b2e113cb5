"""
Report lifecycle exceptions
"""

from core.services.exceptions import ServiceError


class ReportError(ServiceError):
    """Base exception for report lifecycle errors"""
    pass


class ReportValidationError(ReportError):
    """
    Raised when a payload fails validation before reaching the store.
    
    Carries a field error map: ``{field_name: [message, ...]}``. Nested
    fields use dotted keys such as ``tasks.0.hours_spent``.
    """
    
    def __init__(self, errors):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__(f"Invalid report payload: {', '.join(sorted(self.errors))}")


class ReportNotFound(ReportError):
    """Raised when an id does not resolve to an existing report"""
    pass


class ReportPersistenceError(ReportError):
    """Raised when the database rejects or fails a report operation"""
    pass
