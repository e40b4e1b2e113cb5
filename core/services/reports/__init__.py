"""
Report lifecycle services.

Create, list, sign and delete weekly and end-of-term reports; export them
as PDF.
"""

from .actions import ActionResult, ReportActions
from .drafts import ReportDraft
from .errors import ReportError, ReportValidationError, ReportNotFound, ReportPersistenceError
from .export import render_report_pdf
from .lifecycle import ReportLifecycleManager
from .store import ReportStore

__all__ = [
    'ActionResult',
    'ReportActions',
    'ReportDraft',
    'ReportError',
    'ReportValidationError',
    'ReportNotFound',
    'ReportPersistenceError',
    'ReportLifecycleManager',
    'ReportStore',
    'render_report_pdf',
]
