"""
Report Actions

The boundary between the report services and the UI layer. Every operation
returns an ActionResult instead of raising: validation failures carry the
field error map, not-found and persistence failures carry a generic message
only.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from .errors import ReportValidationError, ReportNotFound, ReportPersistenceError
from .lifecycle import ReportLifecycleManager
from .serializers import serialize_report

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = 'Report not found'

ERROR_VALIDATION = 'validation'
ERROR_NOT_FOUND = 'not_found'
ERROR_PERSISTENCE = 'persistence'


@dataclass
class ActionResult:
    """
    Uniform outcome of a report action.

    Attributes:
        success: Whether the action succeeded
        data: Serialized aggregate, list of aggregates, or None
        error: Generic message or field error map, None on success
        error_type: Category of the failure (validation, not_found, persistence)
    """
    success: bool
    data: Any = None
    error: Any = None
    error_type: Optional[str] = None

    def to_dict(self) -> dict:
        """
        Convert to the ``{success, data?, error?}`` shape.

        Keys whose value is None are omitted.
        """
        result = {'success': self.success}
        if self.data is not None:
            result['data'] = self.data
        if self.error is not None:
            result['error'] = self.error
        return result


def _validation_failure(error: ReportValidationError) -> ActionResult:
    return ActionResult(success=False, error=error.errors, error_type=ERROR_VALIDATION)


def _not_found() -> ActionResult:
    return ActionResult(success=False, error=NOT_FOUND_MESSAGE, error_type=ERROR_NOT_FOUND)


def _persistence_failure(message: str, data=None) -> ActionResult:
    return ActionResult(success=False, data=data, error=message, error_type=ERROR_PERSISTENCE)


class ReportActions:
    """
    Result-returning facade over ReportLifecycleManager.

    Example:
        >>> actions = ReportActions()
        >>> result = actions.create(ReportKind.WEEKLY, payload)
        >>> if not result.success:
        ...     show(result.error)
    """

    def __init__(self, manager: Optional[ReportLifecycleManager] = None):
        self.manager = manager or ReportLifecycleManager()

    def create(self, kind: str, payload, today: Optional[date] = None) -> ActionResult:
        try:
            report = self.manager.create(kind, payload, today=today)
        except ReportValidationError as e:
            logger.info(f"Rejected {kind} report: {sorted(e.errors)}")
            return _validation_failure(e)
        except ReportPersistenceError:
            logger.error(f"Failed to create {kind} report", exc_info=True)
            return _persistence_failure('Failed to create report')

        return ActionResult(success=True, data=serialize_report(kind, report))

    def list(self, kind: str) -> ActionResult:
        """
        List reports of a kind, newest first.

        Always reads the store, so a listing never outlives a delete made by
        another request or process.
        """
        try:
            reports = self.manager.list(kind)
        except ReportPersistenceError:
            logger.error(f"Failed to fetch {kind} reports", exc_info=True)
            return _persistence_failure('Failed to fetch reports', data=[])

        return ActionResult(success=True, data=[serialize_report(kind, report) for report in reports])

    def get(self, kind: str, report_id) -> ActionResult:
        try:
            report = self.manager.get(kind, report_id)
        except ReportNotFound:
            return _not_found()
        except ReportPersistenceError:
            logger.error(f"Failed to fetch {kind} report {report_id}", exc_info=True)
            return _persistence_failure('Failed to fetch report')

        return ActionResult(success=True, data=serialize_report(kind, report))

    def sign(self, kind: str, report_id, signature: Optional[str] = None) -> ActionResult:
        try:
            report = self.manager.sign(kind, report_id, signature=signature)
        except ReportValidationError as e:
            return _validation_failure(e)
        except ReportNotFound:
            logger.warning(f"Sign requested for missing {kind} report {report_id}")
            return _not_found()
        except ReportPersistenceError:
            logger.error(f"Failed to sign {kind} report {report_id}", exc_info=True)
            return _persistence_failure('Failed to sign report')

        return ActionResult(success=True, data=serialize_report(kind, report))

    def delete(self, kind: str, report_id) -> ActionResult:
        try:
            self.manager.delete(kind, report_id)
        except ReportNotFound:
            logger.warning(f"Delete requested for missing {kind} report {report_id}")
            return _not_found()
        except ReportPersistenceError:
            logger.error(f"Failed to delete {kind} report {report_id}", exc_info=True)
            return _persistence_failure('Failed to delete report')

        return ActionResult(success=True)
